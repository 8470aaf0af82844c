from .playback_controller import PlaybackController, PlaybackRunner

__all__ = [
    'PlaybackController',
    'PlaybackRunner',
]
