from sqlalchemy.orm import declarative_base
import enum

# Relational store shipped with the Android app
AndroidBase = declarative_base()

# Object store shipped with the iOS app
ObjectBase = declarative_base()


# ============================================================================
# ENUMS
# ============================================================================

class Target(str, enum.Enum):
    """Platforms a cache can be built for"""
    IOS = "ios"
    ANDROID = "android"


class ExecutionMode(str, enum.Enum):
    """Whether transformers persist what they produce"""
    WRITE = "write"
    SIMULATE = "simulate"


class RunStatus(str, enum.Enum):
    """Cache build run status"""
    PENDING = "pending"
    REBUILDING = "rebuilding"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class VideoLabel(str, enum.Enum):
    """Video labels used by the content API"""
    COLLECTION = "collection"
    EPISODE = "episode"
    FEATURE_FILM = "featureFilm"
    SEGMENT = "segment"
    SERIES = "series"
    SHORT_FILM = "shortFilm"
    TRAILER = "trailer"
    BEHIND_THE_SCENES = "behindTheScenes"


CONTAINER_LABELS = (VideoLabel.COLLECTION.value, VideoLabel.SERIES.value)
