"""
Endpoint names and their paths relative to the API base URL.
"""

from typing import Dict

ENDPOINTS: Dict[str, str] = {
    "search": "search/byterm",
    "searchByTitle": "search/bytitle",
    "searchEpisodesByPerson": "search/byperson",
    "searchMusic": "search/music/byterm",
    "podcastByFeedId": "podcasts/byfeedid",
    "podcastByFeedUrl": "podcasts/byfeedurl",
    "podcastByItunesId": "podcasts/byitunesid",
    "podcastByGuid": "podcasts/byguid",
    "podcastsByTag": "podcasts/bytag",
    "podcastsByMedium": "podcasts/bymedium",
    "podcastsTrending": "podcasts/trending",
    "podcastsDead": "podcasts/dead",
    "episodesByFeedId": "episodes/byfeedid",
    "episodesByFeedUrl": "episodes/byfeedurl",
    "episodesByItunesId": "episodes/byitunesid",
    "episodeById": "episodes/byid",
    "episodeByGuid": "episodes/byguid",
    "episodesRandom": "episodes/random",
    "episodesLive": "episodes/live",
    "recentEpisodes": "recent/episodes",
    "recentFeeds": "recent/feeds",
    "recentNewFeeds": "recent/newfeeds",
    "recentSoundbites": "recent/soundbites",
    "valueByFeedId": "value/byfeedid",
    "valueByFeedUrl": "value/byfeedurl",
    "categories": "categories/list",
    "stats": "stats/current",
    "hubPubNotify": "hub/pubnotify",
}


def endpoint_path(name: str) -> str:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise ValueError(f"Unknown endpoint: {name}") from None
