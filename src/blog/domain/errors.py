class BlogAppError(Exception):
    """Base error for the blog app."""


class ContentLoadError(BlogAppError):
    pass


class ResourceError(BlogAppError):
    pass


class PublishError(BlogAppError):
    pass
