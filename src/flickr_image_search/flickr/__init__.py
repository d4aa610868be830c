"""Flickr REST client: request building, transport and response decoding."""
