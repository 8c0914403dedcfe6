"""FilmesApi: CRUD API for movies and cinemas."""
__version__ = "0.1.0"
