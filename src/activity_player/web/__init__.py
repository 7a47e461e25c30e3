"""HTTP control surface for the playback clock."""
