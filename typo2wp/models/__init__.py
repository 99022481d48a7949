from .wordpress import WordPressComment, WordPressPost

__all__ = ["WordPressComment", "WordPressPost"]
