"""
YouTube Data API search for farming tutorials, grouped into the topic
shelves shown on the dashboard.
"""
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

SEARCH_URL = 'https://www.googleapis.com/youtube/v3/search'
SEARCH_SUFFIX = 'farming agriculture tutorial'
MAX_PER_CATEGORY = 4

CATEGORY_KEYWORDS = {
    'Crop Management': ('crop', 'planting', 'harvest'),
    'Irrigation & Water': ('irrigation', 'water', 'drip'),
    'Pest Control': ('pest', 'disease', 'organic'),
}


class VideoSearchError(Exception):
    pass


def format_video(item):
    video_id = item['id']['videoId']
    snippet = item['snippet']
    return {
        'id': video_id,
        'title': snippet.get('title', ''),
        'description': snippet.get('description', ''),
        'thumbnail': snippet.get('thumbnails', {}).get('medium', {}).get('url'),
        'channel': snippet.get('channelTitle', ''),
        'publishedAt': snippet.get('publishedAt'),
        'url': f"https://www.youtube.com/watch?v={video_id}",
    }


def categorize_videos(videos):
    categories = {}
    for name, keywords in CATEGORY_KEYWORDS.items():
        matches = [
            video for video in videos
            if any(keyword in video['title'].lower() for keyword in keywords)
        ]
        categories[name] = matches[:MAX_PER_CATEGORY]
    categories['General Farming'] = videos[:MAX_PER_CATEGORY]
    return categories


class YouTubeClient:
    def __init__(self, api_key=None, timeout=None):
        self.api_key = api_key if api_key is not None else settings.YOUTUBE_API_KEY
        self.timeout = timeout or settings.EXTERNAL_API_TIMEOUT

    def search(self, query, max_results=12):
        """Return (videos, total_results) for a farming tutorial search."""
        params = {
            'part': 'snippet',
            'type': 'video',
            'maxResults': max_results,
            'q': f"{query} {SEARCH_SUFFIX}",
            'key': self.api_key,
        }
        try:
            response = requests.get(SEARCH_URL, params=params, timeout=self.timeout)
            payload = response.json()
        except requests.exceptions.RequestException as exc:
            logger.error("YouTube search failed: %s", exc)
            raise VideoSearchError(f"Video service unavailable: {exc}") from exc
        except ValueError as exc:
            raise VideoSearchError("Invalid response from video service") from exc

        items = payload.get('items')
        if items is None:
            logger.warning("YouTube search for %r returned no items (status %s)", query, response.status_code)
            raise VideoSearchError("No videos found")

        videos = [format_video(item) for item in items if item.get('id', {}).get('videoId')]
        total = (payload.get('pageInfo') or {}).get('totalResults', 0)
        return videos, total
