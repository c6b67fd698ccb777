"""
Tests for the /movies endpoints.
"""


class TestMovies:

    def test_list_is_public(self, client, sample_movie):
        response = client.get("/movies")
        assert response.status_code == 200

        movies = response.json()
        assert len(movies) == 1
        assert movies[0]["_id"] == sample_movie.id
        assert movies[0]["Title"] == "Inception"
        assert movies[0]["Genre"]["Name"] == "Sci-Fi"
        assert movies[0]["Director"]["Name"] == "Christopher Nolan"

    def test_get_by_title(self, client, auth_headers):
        response = client.get("/movies/Inception", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["Featured"] is True

    def test_get_by_title_requires_token(self, client):
        response = client.get("/movies/Inception")
        assert response.status_code == 401

    def test_get_missing_title(self, client, auth_headers):
        response = client.get("/movies/Nope", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Movie not found"

    def test_get_director(self, client, auth_headers):
        response = client.get("/movies/directors/Christopher Nolan", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "Name": "Christopher Nolan",
            "Bio": "British-American director",
        }

    def test_get_missing_director(self, client, auth_headers):
        response = client.get("/movies/directors/Nobody", headers=auth_headers)
        assert response.status_code == 404

    def test_get_genre(self, client, auth_headers):
        response = client.get("/movies/genres/Sci-Fi", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["Description"] == "Science fiction"

    def test_get_genre_requires_token(self, client):
        response = client.get("/movies/genres/Sci-Fi")
        assert response.status_code == 401
