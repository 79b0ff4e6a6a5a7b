"""gnb: create git branches prefixed with your username."""
