"""User interfaces built on top of the wrapping engine."""
