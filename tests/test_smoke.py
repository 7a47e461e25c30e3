"""Smoke test to verify the toolchain works."""


def test_import_activity_player():
    """Verify the activity_player package can be imported."""
    import activity_player

    assert activity_player is not None


def test_subpackages_importable():
    """Verify all subpackages can be imported."""
    import activity_player.geo
    import activity_player.playback
    import activity_player.track
    import activity_player.web

    assert activity_player.geo is not None
    assert activity_player.track is not None
    assert activity_player.playback is not None
    assert activity_player.web is not None
