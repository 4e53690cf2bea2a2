"""Movie catalog entry"""
from sqlalchemy import Boolean, Column, Integer, String, Text

from cineniche_recommendation_service.models.base import Base
from cineniche_recommendation_service.models.category import Category
from cineniche_recommendation_service.models.records import MovieRecord


class MovieTitle(Base):
    """A movie or TV show in the catalog.

    Genre membership is stored as one boolean column per category; a title may
    carry any number of them.
    """
    __tablename__ = 'movies_titles'

    show_id = Column(String(50), primary_key=True)
    type = Column(String(50), nullable=True)
    title = Column(String(255), nullable=True)
    director = Column(Text, nullable=True)
    cast = Column(Text, nullable=True)
    country = Column(Text, nullable=True)
    release_year = Column(Integer, nullable=True)
    rating = Column(String(20), nullable=True)
    duration = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)

    # Genre flags
    Action = Column(Boolean, nullable=True)
    Adventure = Column(Boolean, nullable=True)
    Anime_Series_International_TV_Shows = Column(Boolean, nullable=True)
    British_TV_Shows_Docuseries_International_TV_Shows = Column(Boolean, nullable=True)
    Children = Column(Boolean, nullable=True)
    Comedies = Column(Boolean, nullable=True)
    Comedies_Dramas_International_Movies = Column(Boolean, nullable=True)
    Comedies_International_Movies = Column(Boolean, nullable=True)
    Comedies_Romantic_Movies = Column(Boolean, nullable=True)
    Crime_TV_Shows_Docuseries = Column(Boolean, nullable=True)
    Documentaries = Column(Boolean, nullable=True)
    Documentaries_International_Movies = Column(Boolean, nullable=True)
    Docuseries = Column(Boolean, nullable=True)
    Dramas = Column(Boolean, nullable=True)
    Dramas_International_Movies = Column(Boolean, nullable=True)
    Dramas_Romantic_Movies = Column(Boolean, nullable=True)
    Family_Movies = Column(Boolean, nullable=True)
    Fantasy = Column(Boolean, nullable=True)
    Horror_Movies = Column(Boolean, nullable=True)
    International_Movies_Thrillers = Column(Boolean, nullable=True)
    International_TV_Shows_Romantic_TV_Shows_TV_Dramas = Column(Boolean, nullable=True)
    Kids_TV = Column(Boolean, nullable=True)
    Language_TV_Shows = Column(Boolean, nullable=True)
    Musicals = Column(Boolean, nullable=True)
    Nature_TV = Column(Boolean, nullable=True)
    Reality_TV = Column(Boolean, nullable=True)
    Spirituality = Column(Boolean, nullable=True)
    TV_Action = Column(Boolean, nullable=True)
    TV_Comedies = Column(Boolean, nullable=True)
    TV_Dramas = Column(Boolean, nullable=True)
    Talk_Shows_TV_Comedies = Column(Boolean, nullable=True)
    Thrillers = Column(Boolean, nullable=True)

    @property
    def active_categories(self) -> frozenset[Category]:
        """Categories whose flag is set (NULL counts as unset)."""
        return frozenset(
            category for category in Category
            if getattr(self, category.value)
        )

    def to_record(self) -> MovieRecord:
        """Detach this row into an immutable MovieRecord."""
        return MovieRecord(
            show_id=self.show_id,
            title=self.title,
            type=self.type,
            director=self.director,
            cast=self.cast,
            country=self.country,
            release_year=self.release_year,
            rating=self.rating,
            duration=self.duration,
            description=self.description,
            categories=self.active_categories,
        )

    def __repr__(self):
        return f"<MovieTitle(show_id='{self.show_id}', title='{self.title}')>"
