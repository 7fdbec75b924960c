"""Error taxonomy for matcher runs."""


class MatcherError(Exception):
    """Base for all matcher failures."""


class MissingJDError(MatcherError):
    """Raised when the job description path is empty or not a file."""

    def __init__(self, path: str = ""):
        super().__init__(f"Job description file not found: {path}" if path else "Job description file not found")


class ReadJDError(MatcherError):
    """Raised when the job description exists but cannot be extracted."""


class MissingResumesError(MatcherError):
    """Raised when the resumes path is empty or not a directory."""

    def __init__(self, path: str = ""):
        super().__init__(f"Resumes folder not found: {path}" if path else "Resumes folder not found")


class ListResumesError(MatcherError):
    """Raised when walking the resumes directory fails."""


class NoResumesError(MatcherError):
    """Raised when no resume is discovered, or none survives extraction."""

    def __init__(self, message: str = "No resumes found"):
        super().__init__(message)


class MissingResumeError(MatcherError):
    """Raised when a single-candidate resume path is empty or not a file."""


class ReadResumeError(MatcherError):
    """Raised when a single-candidate resume cannot be extracted."""


class WriteResultsError(MatcherError):
    """Raised when the results CSV cannot be written."""


class MissingAPIKeyError(MatcherError):
    """Raised when the AI pipeline is needed but no credential is configured."""

    def __init__(self):
        super().__init__("API key not configured (set GROQ_API_KEY)")


class UpstreamAPIError(MatcherError):
    """Raised on non-2xx responses, refusals, or JSON that fails its schema."""


class UnsupportedFormatError(MatcherError, ValueError):
    """Raised for a file extension the document extractor does not handle."""

    def __init__(self, ext: str):
        super().__init__(f"Unsupported file: {ext}")
        self.ext = ext
