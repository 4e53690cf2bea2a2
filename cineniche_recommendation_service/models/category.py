"""Genre categories of the movie catalog."""
from enum import Enum


class Category(str, Enum):
    """One member per boolean genre flag on the catalog table.

    Values are the column names, so a member can be used directly with getattr
    on a MovieTitle row.
    """

    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIME_SERIES_INTERNATIONAL_TV_SHOWS = "Anime_Series_International_TV_Shows"
    BRITISH_TV_SHOWS_DOCUSERIES_INTERNATIONAL_TV_SHOWS = "British_TV_Shows_Docuseries_International_TV_Shows"
    CHILDREN = "Children"
    COMEDIES = "Comedies"
    COMEDIES_DRAMAS_INTERNATIONAL_MOVIES = "Comedies_Dramas_International_Movies"
    COMEDIES_INTERNATIONAL_MOVIES = "Comedies_International_Movies"
    COMEDIES_ROMANTIC_MOVIES = "Comedies_Romantic_Movies"
    CRIME_TV_SHOWS_DOCUSERIES = "Crime_TV_Shows_Docuseries"
    DOCUMENTARIES = "Documentaries"
    DOCUMENTARIES_INTERNATIONAL_MOVIES = "Documentaries_International_Movies"
    DOCUSERIES = "Docuseries"
    DRAMAS = "Dramas"
    DRAMAS_INTERNATIONAL_MOVIES = "Dramas_International_Movies"
    DRAMAS_ROMANTIC_MOVIES = "Dramas_Romantic_Movies"
    FAMILY_MOVIES = "Family_Movies"
    FANTASY = "Fantasy"
    HORROR_MOVIES = "Horror_Movies"
    INTERNATIONAL_MOVIES_THRILLERS = "International_Movies_Thrillers"
    INTERNATIONAL_TV_SHOWS_ROMANTIC_TV_SHOWS_TV_DRAMAS = "International_TV_Shows_Romantic_TV_Shows_TV_Dramas"
    KIDS_TV = "Kids_TV"
    LANGUAGE_TV_SHOWS = "Language_TV_Shows"
    MUSICALS = "Musicals"
    NATURE_TV = "Nature_TV"
    REALITY_TV = "Reality_TV"
    SPIRITUALITY = "Spirituality"
    TV_ACTION = "TV_Action"
    TV_COMEDIES = "TV_Comedies"
    TV_DRAMAS = "TV_Dramas"
    TALK_SHOWS_TV_COMEDIES = "Talk_Shows_TV_Comedies"
    THRILLERS = "Thrillers"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Kids TV'."""
        return self.value.replace("_", " ")
