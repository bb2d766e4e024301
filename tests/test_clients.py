from datetime import datetime, timezone

import httpx

from interface.clients import FALLBACK_QUOTE, GitHubClient, MusicCatalogClient, QuotesClient


def _client(cls, handler, base_url="https://example.test"):
    http = httpx.Client(base_url=base_url, transport=httpx.MockTransport(handler))
    return cls(http_client=http, base_url=base_url)


def _failing(request):
    return httpx.Response(503, json={"message": "down"})


def _broken_transport(request):
    raise httpx.ConnectError("connection refused", request=request)


def test_random_quote_maps_fields():
    def handler(request):
        assert request.url.path == "/random"
        assert request.url.params["tags"] == "motivational|inspirational|success"
        return httpx.Response(200, json={"_id": "q1", "content": "Keep going.", "author": "Anon", "tags": ["success"]})

    quote = _client(QuotesClient, handler).fetch_random_quote()
    assert quote == {"content": "Keep going.", "author": "Anon", "tags": ["success"]}


def test_random_quote_fallback_on_status_error():
    quote = _client(QuotesClient, _failing).fetch_random_quote()
    assert quote == {
        "content": "The only way to do great work is to love what you do.",
        "author": "Steve Jobs",
        "tags": ["motivational"],
    }


def test_random_quote_fallback_on_transport_error_is_a_copy():
    quote = _client(QuotesClient, _broken_transport).fetch_random_quote()
    assert quote == FALLBACK_QUOTE

    quote["tags"].append("mutated")
    assert FALLBACK_QUOTE["tags"] == ["motivational"]


def test_quotes_by_tag_and_fallback():
    def handler(request):
        assert request.url.params["tags"] == "wisdom"
        assert request.url.params["limit"] == "2"
        return httpx.Response(200, json={"results": [
            {"_id": "a", "content": "One", "author": "X", "tags": ["wisdom"]},
            {"_id": "b", "content": "Two", "author": "Y"},
        ]})

    quotes = _client(QuotesClient, handler).fetch_quotes_by_tag("wisdom", 2)
    assert [q["id"] for q in quotes] == ["a", "b"]
    assert quotes[1]["tags"] == []

    assert _client(QuotesClient, _failing).fetch_quotes_by_tag() == []
    # unexpected payload shape also falls back
    bad_shape = lambda request: httpx.Response(200, json={"items": []})
    assert _client(QuotesClient, bad_shape).fetch_quotes_by_tag() == []


def test_author_info():
    ok = lambda request: httpx.Response(200, json={"name": "Ada Lovelace", "slug": "ada-lovelace"})
    assert _client(QuotesClient, ok).fetch_author("ada-lovelace")["name"] == "Ada Lovelace"
    assert _client(QuotesClient, _failing).fetch_author("nobody") is None


def test_github_profile_mapping():
    def handler(request):
        assert request.url.path == "/users/octocat"
        return httpx.Response(200, json={
            "login": "octocat", "name": None, "avatar_url": "https://a/img.png",
            "bio": "hi", "public_repos": 8, "followers": 10, "following": 1,
            "created_at": "2011-01-25T18:44:36Z", "location": "SF", "blog": "", "company": "GitHub",
        })

    profile = _client(GitHubClient, handler).fetch_profile("octocat")
    assert profile["username"] == "octocat"
    assert profile["name"] == "octocat"
    assert profile["publicRepos"] == 8
    assert profile["avatar"] == "https://a/img.png"


def test_github_fallbacks():
    client = _client(GitHubClient, _broken_transport)
    assert client.fetch_profile("ghost") is None
    assert client.fetch_repos("ghost") == []
    assert client.fetch_trending("python") == []
    assert client.fetch_activity("ghost") == {
        "totalEvents": 0, "commits": 0, "repos": 0, "lastActivity": None,
    }


def test_github_activity_counts_recent_events():
    events = [
        {"type": "PushEvent", "created_at": "2026-03-09T12:00:00Z", "repo": {"name": "me/a"},
         "payload": {"commits": [{}, {}, {}]}},
        {"type": "WatchEvent", "created_at": "2026-03-08T12:00:00Z", "repo": {"name": "me/b"}},
        {"type": "PushEvent", "created_at": "2026-02-01T12:00:00Z", "repo": {"name": "me/c"},
         "payload": {"commits": [{}]}},
    ]
    client = _client(GitHubClient, lambda request: httpx.Response(200, json=events))

    activity = client.fetch_activity("me", now=datetime(2026, 3, 10, tzinfo=timezone.utc))
    assert activity == {
        "totalEvents": 2,
        "commits": 3,
        "repos": 2,
        "lastActivity": "2026-03-09T12:00:00Z",
    }


def test_github_repos_and_trending_mapping():
    repo = {"id": 1, "name": "x", "full_name": "me/x", "stargazers_count": 5, "forks_count": 2,
            "language": "Python", "html_url": "https://github.com/me/x"}

    def handler(request):
        if request.url.path.startswith("/search"):
            assert request.url.params["q"] == "language:python stars:>100"
            return httpx.Response(200, json={"items": [repo]})
        assert request.url.params["per_page"] == "3"
        return httpx.Response(200, json=[repo])

    client = _client(GitHubClient, handler)
    repos = client.fetch_repos("me", limit=3)
    assert repos[0]["stars"] == 5
    assert repos[0]["topics"] == []

    trending = client.fetch_trending("python")
    assert trending[0]["fullName"] == "me/x"


def test_music_catalog_search_and_recommendations():
    music = MusicCatalogClient(latency=0)

    assert len(music.fetch_playlists()) == 5
    assert len(music.fetch_playlist_tracks(1)) == 5
    assert music.fetch_playlist_tracks(99) == []
    assert [t["title"] for t in music.search("AMBIENT")] == ["Midnight Coding", "Debug Sessions"]
    assert [t["title"] for t in music.search("zen")] == ["Binary Dreams"]
    assert [t["mood"] for t in music.recommendations("debugging")] == ["focused"]
    assert [t["mood"] for t in music.recommendations("learning")] == ["relaxed"]
    assert [t["mood"] for t in music.recommendations("anything")] == ["concentrated"]


def test_music_catalog_returns_copies():
    music = MusicCatalogClient(latency=0)
    music.fetch_playlists()[0]["name"] = "changed"
    assert music.fetch_playlists()[0]["name"] == "Deep Focus"
