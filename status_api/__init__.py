"""HTTP status endpoints for the Daily Updates bot."""
