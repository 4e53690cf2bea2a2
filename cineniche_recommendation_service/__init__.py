"""CineNiche movie recommendation service"""
