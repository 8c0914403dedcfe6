"""Seed script to populate sample addresses, cinemas, movies and showings."""

import asyncio
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import select

from filmes_api.database import AsyncSessionLocal, create_tables
from filmes_api.models import Address, Cinema, Movie, Showing

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)

CINEMAS_DATA = [
    {"name": "Cine Odeon", "street": "Praça Floriano, 7"},
    {"name": "Cine Belas Artes", "street": "Rua da Consolação, 2423"},
]

MOVIES_DATA = [
    {
        "title": "Central do Brasil",
        "director": "Walter Salles",
        "genre": "Drama",
        "duration": 113,
        "release_date": date(1998, 4, 3),
        "revenue": Decimal("5595000.00"),
        "cinemas": ["Cine Odeon", "Cine Belas Artes"],
    },
    {
        "title": "Cidade de Deus",
        "director": "Fernando Meirelles",
        "genre": "Crime",
        "duration": 130,
        "release_date": date(2002, 8, 30),
        "revenue": Decimal("30641770.00"),
        "cinemas": ["Cine Odeon"],
    },
    {
        "title": "O Auto da Compadecida",
        "director": "Guel Arraes",
        "genre": "Comédia",
        "duration": 104,
        "release_date": date(2000, 9, 10),
        "revenue": None,
        "cinemas": [],
    },
]


async def seed() -> None:
    """Seed the database, skipping records whose name or title already exists."""
    await create_tables()

    async with AsyncSessionLocal() as session:
        cinemas: dict[str, Cinema] = {}
        for cinema_data in CINEMAS_DATA:
            result = await session.execute(
                select(Cinema).where(Cinema.name == cinema_data["name"])
            )
            existing = result.scalar_one_or_none()
            if existing:
                logger.info(f"Cinema {cinema_data['name']!r} already exists, skipping")
                cinemas[existing.name] = existing
                continue

            cinema = Cinema(
                name=cinema_data["name"],
                address=Address(street=cinema_data["street"]),
            )
            session.add(cinema)
            cinemas[cinema.name] = cinema
            logger.info(f"Added cinema: {cinema.name}")

        for movie_data in MOVIES_DATA:
            result = await session.execute(
                select(Movie).where(Movie.title == movie_data["title"])
            )
            if result.scalar_one_or_none():
                logger.info(f"Movie {movie_data['title']!r} already exists, skipping")
                continue

            fields = {key: value for key, value in movie_data.items() if key != "cinemas"}
            movie = Movie(
                **fields,
                showings=[Showing(cinema=cinemas[name]) for name in movie_data["cinemas"]],
            )
            session.add(movie)
            logger.info(f"Added movie: {movie.title}")

        await session.commit()
        logger.info("Seeding complete")


if __name__ == "__main__":
    asyncio.run(seed())
