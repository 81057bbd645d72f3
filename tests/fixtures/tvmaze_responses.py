"""
Mock TVMaze API responses for testing.

Shapes follow the public API documented at https://www.tvmaze.com/api.
Payloads are trimmed to the fields the client reads.
"""

# GET /shows/1 response
TVMAZE_SHOW = {
    "id": 1,
    "url": "https://www.tvmaze.com/shows/1/test-show",
    "name": "Test Show",
    "type": "Scripted",
    "language": "English",
    "genres": ["Drama", "Science-Fiction"],
    "status": "Running",
    "runtime": 60,
    "averageRuntime": 58,
    "premiered": "2010-01-01",
    "ended": None,
    "officialSite": "https://testshow.com",
    "schedule": {"time": "21:00", "days": ["Sunday"]},
    "rating": {"average": 8.5},
    "weight": 95,
    "network": {
        "id": 2,
        "name": "CBS",
        "country": {
            "name": "United States",
            "code": "US",
            "timezone": "America/New_York",
        },
        "officialSite": "https://www.cbs.com/",
    },
    "webChannel": None,
    "dvdCountry": None,
    "externals": {"tvrage": 12345, "thetvdb": 67890, "imdb": "tt1234567"},
    "image": {
        "medium": "https://static.tvmaze.com/uploads/images/medium_portrait/1/1.jpg",
        "original": "https://static.tvmaze.com/uploads/images/original_untouched/1/1.jpg",
    },
    "summary": "<p><b>Test Show</b> is a show about testing.</p>",
    "updated": 1640995200,
    "_links": {
        "self": {"href": "https://api.tvmaze.com/shows/1"},
        "previousepisode": {"href": "https://api.tvmaze.com/episodes/185054"},
    },
}

# GET /search/shows?q=test response
TVMAZE_SEARCH_SHOWS = [
    {"score": 0.99, "show": TVMAZE_SHOW},
    {"score": 0.51, "show": {"id": 42, "name": "Testing Grounds"}},
]

# GET /shows/1?embed[]=cast&embed[]=nextepisode response
TVMAZE_SHOW_EMBEDDED = {
    **TVMAZE_SHOW,
    "_embedded": {
        "cast": [
            {
                "person": {"id": 7, "name": "Jane Doe", "updated": 1600000000},
                "character": {"id": 70, "name": "Agent Smith"},
                "self": False,
                "voice": False,
            }
        ],
        "nextepisode": {"id": 99, "name": "Next One", "season": 2, "number": 1},
    },
}

# GET /shows/169/episodebynumber?season=1&number=1 response
TVMAZE_EPISODE = {
    "id": 12192,
    "url": "https://www.tvmaze.com/episodes/12192/breaking-bad-1x01-pilot",
    "name": "Pilot",
    "season": 1,
    "number": 1,
    "type": "regular",
    "airdate": "2008-01-20",
    "airtime": "22:00",
    "airstamp": "2008-01-21T03:00:00+00:00",
    "runtime": 60,
    "rating": {"average": 8.2},
    "image": {
        "medium": "https://static.tvmaze.com/uploads/images/medium_landscape/1/4388.jpg",
        "original": "https://static.tvmaze.com/uploads/images/original_untouched/1/4388.jpg",
    },
    "summary": "<p>A high school chemistry teacher learns he has cancer.</p>",
    "_links": {"self": {"href": "https://api.tvmaze.com/episodes/12192"}},
}

# GET /shows/169/episodes response
TVMAZE_EPISODES = [
    TVMAZE_EPISODE,
    {"id": 12193, "name": "Cat's in the Bag...", "season": 1, "number": 2},
    {"id": 12194, "name": "...And the Bag's in the River", "season": 1, "number": 3},
]

# GET /schedule?country=US&date=2024-01-01 response (episodes with their show)
TVMAZE_SCHEDULE = [
    {
        "id": 501,
        "name": "New Year Special",
        "season": 3,
        "number": None,
        "type": "significant_special",
        "airdate": "2024-01-01",
        "airtime": "20:00",
        "show": {"id": 1, "name": "Test Show"},
    },
    {
        "id": 502,
        "name": "Countdown",
        "season": 12,
        "number": 4,
        "airdate": "2024-01-01",
        "airtime": "21:00",
        "show": {"id": 3, "name": "Late Night"},
    },
]

# GET /schedule/web response (show is embedded)
TVMAZE_WEB_SCHEDULE = [
    {
        "id": 601,
        "name": "Streaming Premiere",
        "season": 1,
        "number": 1,
        "airdate": "2024-01-01",
        "airtime": "",
        "_embedded": {"show": {"id": 8, "name": "Web Original"}},
    }
]

# GET /shows/1/cast response
TVMAZE_CAST = [
    {
        "person": {"id": 7, "name": "Jane Doe", "updated": 1600000000},
        "character": {"id": 70, "name": "Agent Smith"},
        "self": False,
        "voice": False,
    },
    {
        "person": {"id": 8, "name": "John Roe", "updated": 1600000001},
        "character": {"id": 80, "name": "Dr. Who"},
        "self": False,
        "voice": True,
    },
]

# GET /shows/1/crew response
TVMAZE_CREW = [
    {"type": "Creator", "person": {"id": 9, "name": "Vince Gilligan", "updated": 1600000002}},
]

# GET /people/7 response
TVMAZE_PERSON = {
    "id": 7,
    "url": "https://www.tvmaze.com/people/7/jane-doe",
    "name": "Jane Doe",
    "country": {"name": "Canada", "code": "CA", "timezone": "America/Halifax"},
    "birthday": "1980-05-17",
    "deathday": None,
    "gender": "Female",
    "image": None,
    "updated": 1600000000,
    "_links": {"self": {"href": "https://api.tvmaze.com/people/7"}},
}

# GET /search/people?q=jane response
TVMAZE_SEARCH_PEOPLE = [
    {"score": 0.87, "person": TVMAZE_PERSON},
]

# GET /updates/shows response
TVMAZE_UPDATES = {"1": 1610000000, "2": 1620000000}
