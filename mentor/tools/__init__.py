from mentor.tools.github_search import GitHubSearchError, search_github
from mentor.tools.youtube_search import YouTubeSearchError, search_youtube

__all__ = ["GitHubSearchError", "YouTubeSearchError", "search_github", "search_youtube"]
