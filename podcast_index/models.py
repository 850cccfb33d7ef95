"""
Response shapes returned by the Podcast Index API.

These are typing aids only: responses are passed through as decoded JSON
and are never checked against these declarations at runtime. Use
``podcast_index.validation`` to check live responses.
"""

from typing import Dict, List, Optional, TypedDict, Union


class ApiResponse(TypedDict, total=False):
    status: Union[str, bool]
    description: str


class Feed(TypedDict, total=False):
    id: int
    podcastGuid: str
    title: str
    url: str
    originalUrl: str
    link: str
    description: str
    author: str
    ownerName: str
    image: str
    artwork: str
    lastUpdateTime: int
    lastCrawlTime: int
    lastParseTime: int
    lastGoodHttpStatusTime: int
    lastHttpStatus: int
    contentType: str
    itunesId: Optional[int]
    generator: Optional[str]
    language: str
    explicit: bool
    type: int
    medium: str
    dead: int
    episodeCount: int
    crawlErrors: int
    parseErrors: int
    categories: Optional[Dict[str, str]]
    locked: int
    imageUrlHash: int
    newestItemPubdate: int


class Episode(TypedDict, total=False):
    id: int
    title: str
    link: str
    description: str
    guid: str
    datePublished: int
    datePublishedPretty: str
    dateCrawled: int
    enclosureUrl: str
    enclosureType: str
    enclosureLength: int
    duration: Optional[int]
    explicit: int
    episode: Optional[int]
    episodeType: Optional[str]
    season: Optional[int]
    image: str
    feedItunesId: Optional[int]
    feedImage: str
    feedId: int
    feedTitle: str
    feedLanguage: str
    chaptersUrl: Optional[str]
    transcriptUrl: Optional[str]


class TrendingFeed(TypedDict, total=False):
    id: int
    url: str
    title: str
    description: str
    author: str
    image: str
    artwork: str
    newestItemPublishTime: int
    itunesId: Optional[int]
    trendScore: int
    language: str
    categories: Optional[Dict[str, str]]


class RecentFeed(TypedDict, total=False):
    id: int
    url: str
    title: str
    newestItemPublishTime: int
    oldestItemPublishTime: int
    itunesId: Optional[int]
    language: str
    categories: Optional[Dict[str, str]]


class NewFeed(TypedDict, total=False):
    id: int
    url: str
    timeAdded: int
    status: str
    contentHash: str
    language: str


class Soundbite(TypedDict, total=False):
    enclosureUrl: str
    title: str
    startTime: int
    duration: int
    episodeId: int
    episodeTitle: str
    feedTitle: str
    feedUrl: str
    feedId: int


class Category(TypedDict):
    id: int
    name: str


class ValueModel(TypedDict, total=False):
    type: str
    method: str
    suggested: str


class ValueDestination(TypedDict, total=False):
    name: str
    address: str
    type: str
    split: int
    fee: bool


class Value(TypedDict, total=False):
    model: ValueModel
    destinations: List[ValueDestination]


class Stats(TypedDict, total=False):
    feedCountTotal: int
    episodeCountTotal: int
    feedsWithNewEpisodes3days: int
    feedsWithNewEpisodes10days: int
    feedsWithNewEpisodes30days: int
    feedsWithNewEpisodes90days: int
    feedsWithValueBlocks: int


class SearchResponse(ApiResponse, total=False):
    feeds: List[Feed]
    count: int
    query: str


class PodcastResponse(ApiResponse, total=False):
    query: Dict[str, str]
    feed: Feed


class EpisodesResponse(ApiResponse, total=False):
    items: List[Episode]
    count: int
    query: Union[str, Dict[str, str]]


class EpisodeResponse(ApiResponse, total=False):
    id: str
    episode: Episode


class RandomEpisodesResponse(ApiResponse, total=False):
    episodes: List[Episode]
    count: int
    max: str


class TrendingResponse(ApiResponse, total=False):
    feeds: List[TrendingFeed]
    count: int
    max: int
    since: int


class RecentFeedsResponse(ApiResponse, total=False):
    feeds: List[RecentFeed]
    count: int
    max: str
    since: str


class RecentNewFeedsResponse(ApiResponse, total=False):
    feeds: List[NewFeed]
    count: int
    max: str


class SoundbitesResponse(ApiResponse, total=False):
    items: List[Soundbite]
    count: int


class ValueResponse(ApiResponse, total=False):
    query: Dict[str, str]
    value: Value


class CategoriesResponse(ApiResponse, total=False):
    feeds: List[Category]
    count: int


class StatsResponse(ApiResponse, total=False):
    stats: Stats


class HubResponse(ApiResponse, total=False):
    pass
