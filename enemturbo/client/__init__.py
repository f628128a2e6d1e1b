"""Landing-page client site."""
