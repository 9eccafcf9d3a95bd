"""Data model definitions. Explicit boundaries between catalog, query, and UI layers."""

from dataclasses import dataclass, field

ACCESS_TYPES: tuple[str, ...] = ("boat", "shore", "any")
ENTRY_DIFFICULTIES: tuple[str, ...] = ("beginner", "intermediate", "advanced")
SUIT_TYPES: tuple[str, ...] = (
    "swimsuit",
    "wetsuit-3mm",
    "wetsuit-5mm",
    "wetsuit-7mm",
    "drysuit",
)
EXPERIENCE_LEVELS: tuple[str, ...] = ENTRY_DIFFICULTIES

ANY_ACCESS = "any"


@dataclass(frozen=True)
class DiveSite:
    """A single catalogued dive site. Never mutated after loading."""

    id: int  # Unique catalog identifier
    name: str
    location: str  # "Island, Country" display string
    lat: float  # Latitude (decimal degrees)
    lon: float  # Longitude (decimal degrees)
    temp_min: float  # Coldest water temperature (°C)
    temp_max: float  # Warmest water temperature (°C)
    marine_life: tuple[str, ...]
    coral_type: tuple[str, ...]
    visibility_min: float  # Minimum visibility (meters)
    site_type: tuple[str, ...]  # "reef", "wreck", "wall", ...
    access_type: str  # One of ACCESS_TYPES
    entry_difficulty: str  # One of ENTRY_DIFFICULTIES
    description: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class PreferenceQuery:
    """Sparse search preferences. Absent or empty fields impose no constraint."""

    temp_min: float | None = None
    temp_max: float | None = None
    marine_life: tuple[str, ...] = ()
    coral_type: tuple[str, ...] = ()
    visibility_min: float | None = None
    site_type: tuple[str, ...] = ()
    access_type: str | None = None  # "any" behaves like None
    entry_difficulty: str | None = None


@dataclass(frozen=True)
class GasDurationInput:
    tank_size: float | None  # Liters
    start_pressure: float | None  # bar
    end_pressure: float | None  # Reserve pressure (bar)
    depth: float | None  # meters


@dataclass(frozen=True)
class SacInput:
    air_used: float | None  # Liters
    depth: float | None  # Average depth (meters)
    time: float | None  # Dive time (minutes)


@dataclass(frozen=True)
class ModInput:
    oxygen_percentage: float | None  # 0 < O2% <= 100
    max_ppo2: float = 1.4  # atm


@dataclass(frozen=True)
class WeightInput:
    body_weight: float | None  # kg
    suit_type: str | None  # One of SUIT_TYPES
    experience: str | None  # One of EXPERIENCE_LEVELS
    saltwater: bool = True


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a catalog search. `source` tells the UI where data came from."""

    sites: tuple[DiveSite, ...]
    source: str  # "static", "remote", or "static_fallback"
    error: str | None = None  # Remote failure message when falling back


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str


@dataclass(frozen=True)
class DiveLogEntry:
    site_id: int | None
    site_name: str
    location: str
    date: str  # "YYYY-MM-DD"
    notes: str = ""
    photos: tuple[str, ...] = ()


@dataclass(frozen=True)
class FeedComment:
    id: int
    user_name: str
    comment: str
    created_at: str  # ISO 8601


@dataclass(frozen=True)
class FeedPost:
    id: int
    user_id: str
    user_name: str
    user_avatar: str
    site_id: int
    site_name: str
    caption: str
    media: tuple[str, ...]
    created_at: str  # ISO 8601
    likes_count: int
    comments: tuple[FeedComment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Review:
    id: int
    user_name: str
    rating: int  # 1..5 stars
    comment: str
    date: str  # "YYYY-MM-DD"
    helpful: int = 0


@dataclass(frozen=True)
class UserProfile:
    name: str
    bio: str = ""
    location: str = ""
    certification: str = ""
