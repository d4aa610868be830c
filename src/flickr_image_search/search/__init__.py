"""Turn search results into view models for a presentation layer."""
