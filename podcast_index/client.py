"""
Podcast Index API client.

Each public method maps its arguments to query options, sends one signed
request through the shared transport and returns the decoded response.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import aiohttp

from .auth import Credentials
from .config import ClientConfig
from .endpoints import endpoint_path
from .models import (
    CategoriesResponse,
    EpisodeResponse,
    EpisodesResponse,
    HubResponse,
    PodcastResponse,
    RandomEpisodesResponse,
    RecentFeedsResponse,
    RecentNewFeedsResponse,
    SearchResponse,
    SoundbitesResponse,
    StatsResponse,
    TrendingResponse,
    ValueResponse,
)
from .observer import Observer, describe_input, describe_output, notify
from .query import to_array
from .transport import DEFAULT_BASE_URL, USER_AGENT, Transport
from .version import API_VERSION, __version__

logger = logging.getLogger(__name__)

Many = Union[str, Sequence[str], None]


def _many(value: Many) -> Optional[List[str]]:
    items = to_array(value)
    return items or None


class PodcastIndexClient:
    """Client for the Podcast Index API."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = USER_AGENT,
        observer: Optional[Observer] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """Initialize the Podcast Index client.

        Args:
            api_key: Podcast Index API key
            api_secret: Podcast Index API secret
            base_url: Base URL for the API
            user_agent: User-Agent header sent with every request
            observer: Called as ``observer(event, properties)`` after each
                successful call; exceptions it raises are discarded
            session: Existing aiohttp session to use, left open on close()
            timeout: Total per-request timeout in seconds, none by default
            transport: Prebuilt transport, overrides base_url/session/timeout
        """
        self.credentials = Credentials(key=api_key, secret=api_secret)
        self.observer = observer
        self.transport = transport or Transport(
            base_url=base_url,
            user_agent=user_agent,
            session=session,
            timeout=timeout,
        )
        notify(
            self.observer,
            "client_initialized",
            {"client_version": __version__, "api_version": API_VERSION},
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, observer: Optional[Observer] = None
    ) -> "PodcastIndexClient":
        return cls(
            api_key=config.api_key,
            api_secret=config.api_secret,
            base_url=config.base_url,
            user_agent=config.user_agent,
            observer=observer,
            timeout=config.timeout,
        )

    async def __aenter__(self) -> "PodcastIndexClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.transport.close()

    async def fetch(self, endpoint: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """Call an endpoint by name and return the raw decoded response."""
        options = options or {}
        result = await self.transport.fetch(endpoint_path(endpoint), options, self.credentials)

        properties: Dict[str, Any] = {"endpoint": endpoint, "params": describe_input(options)}
        properties.update(describe_output(result))
        notify(self.observer, endpoint, properties)
        return result

    # Search

    async def search(
        self,
        q: str,
        val: Optional[str] = None,
        aponly: bool = False,
        clean: bool = False,
        fulltext: bool = False,
        max_results: Optional[int] = None,
    ) -> SearchResponse:
        """Search podcasts by term across title, author and owner."""
        return await self.fetch(
            "search",
            {
                "q": q,
                "val": val,
                "aponly": aponly,
                "clean": clean,
                "fulltext": fulltext,
                "max": max_results,
            },
        )

    async def search_by_title(
        self,
        q: str,
        val: Optional[str] = None,
        clean: bool = False,
        fulltext: bool = False,
        similar: bool = False,
        max_results: Optional[int] = None,
    ) -> SearchResponse:
        return await self.fetch(
            "searchByTitle",
            {
                "q": q,
                "val": val,
                "clean": clean,
                "fulltext": fulltext,
                "similar": similar,
                "max": max_results,
            },
        )

    async def search_episodes_by_person(
        self, q: str, fulltext: bool = False, max_results: Optional[int] = None
    ) -> EpisodesResponse:
        return await self.fetch(
            "searchEpisodesByPerson", {"q": q, "fulltext": fulltext, "max": max_results}
        )

    async def search_music(
        self,
        q: str,
        val: Optional[str] = None,
        aponly: bool = False,
        clean: bool = False,
        fulltext: bool = False,
        max_results: Optional[int] = None,
    ) -> SearchResponse:
        return await self.fetch(
            "searchMusic",
            {
                "q": q,
                "val": val,
                "aponly": aponly,
                "clean": clean,
                "fulltext": fulltext,
                "max": max_results,
            },
        )

    # Podcasts

    async def podcast_by_feed_id(self, feed_id: int) -> PodcastResponse:
        return await self.fetch("podcastByFeedId", {"id": feed_id})

    async def podcast_by_feed_url(self, url: str) -> PodcastResponse:
        return await self.fetch("podcastByFeedUrl", {"url": url})

    async def podcast_by_itunes_id(self, itunes_id: int) -> PodcastResponse:
        return await self.fetch("podcastByItunesId", {"id": itunes_id})

    async def podcast_by_guid(self, guid: str) -> PodcastResponse:
        return await self.fetch("podcastByGuid", {"guid": guid})

    async def podcasts_by_tag(
        self,
        value_time_split: bool = False,
        max_results: Optional[int] = None,
        start_at: Optional[int] = None,
    ) -> SearchResponse:
        """Podcasts carrying a value block, or value time splits if requested."""
        return await self.fetch(
            "podcastsByTag",
            {
                "podcast-value": not value_time_split,
                "podcast-valueTimeSplit": value_time_split,
                "max": max_results,
                "start_at": start_at,
            },
        )

    async def podcasts_by_medium(
        self, medium: str, max_results: Optional[int] = None
    ) -> SearchResponse:
        return await self.fetch("podcastsByMedium", {"medium": medium, "max": max_results})

    async def podcasts_trending(
        self,
        max_results: Optional[int] = None,
        since: Optional[int] = None,
        lang: Many = None,
        cat: Many = None,
        notcat: Many = None,
    ) -> TrendingResponse:
        return await self.fetch(
            "podcastsTrending",
            {
                "max": max_results,
                "since": since,
                "lang": _many(lang),
                "cat": _many(cat),
                "notcat": _many(notcat),
            },
        )

    async def podcasts_dead(self) -> SearchResponse:
        return await self.fetch("podcastsDead")

    # Episodes

    async def episodes_by_feed_id(
        self,
        feed_id: Union[int, Sequence[int]],
        since: Optional[int] = None,
        max_results: Optional[int] = None,
        fulltext: bool = False,
    ) -> EpisodesResponse:
        """Episodes for one feed, or for several when given a list of ids."""
        ids = to_array(feed_id)
        return await self.fetch(
            "episodesByFeedId",
            {
                "id": ids[0] if len(ids) == 1 else ids,
                "since": since,
                "max": max_results,
                "fulltext": fulltext,
            },
        )

    async def episodes_by_feed_url(
        self,
        url: str,
        since: Optional[int] = None,
        max_results: Optional[int] = None,
        fulltext: bool = False,
    ) -> EpisodesResponse:
        return await self.fetch(
            "episodesByFeedUrl",
            {"url": url, "since": since, "max": max_results, "fulltext": fulltext},
        )

    async def episodes_by_itunes_id(
        self,
        itunes_id: int,
        since: Optional[int] = None,
        max_results: Optional[int] = None,
        fulltext: bool = False,
    ) -> EpisodesResponse:
        return await self.fetch(
            "episodesByItunesId",
            {"id": itunes_id, "since": since, "max": max_results, "fulltext": fulltext},
        )

    async def episode_by_id(self, episode_id: int, fulltext: bool = False) -> EpisodeResponse:
        return await self.fetch("episodeById", {"id": episode_id, "fulltext": fulltext})

    async def episode_by_guid(
        self,
        guid: str,
        feed_url: Optional[str] = None,
        feed_id: Optional[int] = None,
        fulltext: bool = False,
    ) -> EpisodeResponse:
        return await self.fetch(
            "episodeByGuid",
            {"guid": guid, "feedurl": feed_url, "feedid": feed_id, "fulltext": fulltext},
        )

    async def episodes_random(
        self,
        max_results: Optional[int] = None,
        lang: Many = None,
        cat: Many = None,
        notcat: Many = None,
        fulltext: bool = False,
    ) -> RandomEpisodesResponse:
        return await self.fetch(
            "episodesRandom",
            {
                "max": max_results,
                "lang": _many(lang),
                "cat": _many(cat),
                "notcat": _many(notcat),
                "fulltext": fulltext,
            },
        )

    async def episodes_live(self, max_results: Optional[int] = None) -> EpisodesResponse:
        return await self.fetch("episodesLive", {"max": max_results})

    # Recent

    async def recent_episodes(
        self,
        max_results: Optional[int] = None,
        exclude: Optional[str] = None,
        before: Optional[int] = None,
        fulltext: bool = False,
    ) -> EpisodesResponse:
        return await self.fetch(
            "recentEpisodes",
            {
                "max": max_results,
                "excludeString": exclude,
                "before": before,
                "fulltext": fulltext,
            },
        )

    async def recent_feeds(
        self,
        max_results: Optional[int] = None,
        since: Optional[int] = None,
        lang: Many = None,
        cat: Many = None,
        notcat: Many = None,
    ) -> RecentFeedsResponse:
        return await self.fetch(
            "recentFeeds",
            {
                "max": max_results,
                "since": since,
                "lang": _many(lang),
                "cat": _many(cat),
                "notcat": _many(notcat),
            },
        )

    async def recent_new_feeds(
        self, max_results: Optional[int] = None, since: Optional[int] = None
    ) -> RecentNewFeedsResponse:
        return await self.fetch("recentNewFeeds", {"max": max_results, "since": since})

    async def recent_soundbites(self, max_results: Optional[int] = None) -> SoundbitesResponse:
        return await self.fetch("recentSoundbites", {"max": max_results})

    # Value, categories, stats

    async def value_by_feed_id(self, feed_id: int) -> ValueResponse:
        return await self.fetch("valueByFeedId", {"id": feed_id})

    async def value_by_feed_url(self, url: str) -> ValueResponse:
        return await self.fetch("valueByFeedUrl", {"url": url})

    async def categories(self) -> CategoriesResponse:
        return await self.fetch("categories")

    async def stats(self) -> StatsResponse:
        return await self.fetch("stats")

    # Hub

    async def hub_pub_notify(
        self, feed_id: Optional[int] = None, url: Optional[str] = None
    ) -> HubResponse:
        """Tell Podcast Index that a feed has changed.

        Exactly one of ``feed_id`` or ``url`` must be given.
        """
        if (feed_id is None) == (url is None):
            raise ValueError("Pass exactly one of feed_id or url")
        return await self.fetch("hubPubNotify", {"id": feed_id, "url": url})
