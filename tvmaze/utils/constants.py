"""
Constantes globales du client TVMaze.

- Point d'entree et en-tetes HTTP par defaut
- Types d'identifiants externes acceptes par /lookup/shows
- Valeurs acceptees par le parametre `since` des endpoints /updates
- Chaines d'attribution exigees par la licence des donnees TVMaze
"""

# API
BASE_URL = "https://api.tvmaze.com"
USER_AGENT = "TVMaze-Python-Client/1.0"
DEFAULT_TIMEOUT = 30.0
ACCEPT_JSON = "application/json"

# Identifiants externes pour /lookup/shows
LOOKUP_TYPES = frozenset({"tvrage", "thetvdb", "imdb"})

# Fenetres de temps pour /updates/shows et /updates/people
UPDATE_WINDOWS = frozenset({"day", "week", "month"})

# Attribution (licence CC BY-SA 4.0)
TVMAZE_NAME = "TVMaze"
TVMAZE_SITE_URL = "https://www.tvmaze.com"
LICENSE_NAME = "CC BY-SA 4.0"
LICENSE_URL = "https://creativecommons.org/licenses/by-sa/4.0/"

# Resume tronque
DEFAULT_SUMMARY_LENGTH = 200
ELLIPSIS = "..."
