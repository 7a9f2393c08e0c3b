"""HTTP Presentation Layer."""

from wizarding.presentation.http.router import router

__all__ = ["router"]
