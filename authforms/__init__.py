"""Sign-in / sign-up forms: schema validation and submission to an auth API."""

__version__ = "0.1.0"
