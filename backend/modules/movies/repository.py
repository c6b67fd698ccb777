"""
Movie repository for database access.

Reads the `movies` table. `genre` and `director` are jsonb columns
({"name", "description"} and {"name", "bio"}), filtered with PostgREST's
`->>` JSON operator.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Movie, Genre, Director

TABLE = "movies"


class MovieRepository(BaseRepository[Movie]):
    """IMovieStore backed by Supabase."""

    async def list_all(self) -> list[Movie]:
        query = self._db.table(TABLE).select("*").order("title")
        result = await self._execute(query, "movies.list_all")
        return [self._map_to_movie(row) for row in result.data]

    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        query = self._db.table(TABLE).select("*").eq("id", movie_id).limit(1)
        result = await self._execute(query, "movies.find_by_id")
        if not result.data:
            return None
        return self._map_to_movie(result.data[0])

    async def find_by_title(self, title: str) -> Optional[Movie]:
        query = self._db.table(TABLE).select("*").eq("title", title).limit(1)
        result = await self._execute(query, "movies.find_by_title")
        if not result.data:
            return None
        return self._map_to_movie(result.data[0])

    async def find_director(self, name: str) -> Optional[Director]:
        query = self._db.table(TABLE).select("director").eq("director->>name", name).limit(1)
        result = await self._execute(query, "movies.find_director")
        if not result.data:
            return None
        return Director(**result.data[0]["director"])

    async def find_genre(self, name: str) -> Optional[Genre]:
        query = self._db.table(TABLE).select("genre").eq("genre->>name", name).limit(1)
        result = await self._execute(query, "movies.find_genre")
        if not result.data:
            return None
        return Genre(**result.data[0]["genre"])

    @staticmethod
    def _map_to_movie(row: dict[str, Any]) -> Movie:
        """Map a database row to a Movie model."""
        return Movie(
            id=str(row["id"]),
            title=row["title"],
            description=row["description"],
            genre=Genre(**row["genre"]) if row.get("genre") else None,
            director=Director(**row["director"]) if row.get("director") else None,
            actors=row.get("actors") or [],
            image_url=row.get("image_url"),
            featured=bool(row.get("featured")),
        )
