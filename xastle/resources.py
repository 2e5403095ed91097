"""Keyed resource containers and the game's asset catalogue."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Iterator

from xastle.config import Font, Music, Texture

TEXTURE_FILES: Dict[Texture, str] = {
    Texture.SPLASH_BG: "Assets/Textures/SplashState/splash.jpg",
    Texture.TITLE_BG: "Assets/Textures/TitleState/TitleBG.jpg",
    Texture.TITLE_TEXT: "Assets/Textures/TitleState/TitleText.png",
    Texture.MEGA_MAN_SHEET_1X48X48X1: "Assets/Textures/Player/PlayerAtlas.png",
    Texture.BG_INTRO: "Assets/Textures/backgrounds/Bg1.jpg",
    Texture.TILESET_INTRO: "Assets/Textures/tilesets/TSet1_50x50.png",
}

FONT_FILES: Dict[Font, str] = {
    Font.FONT1: "Assets/Fonts/Crusty.ttf",
}

MUSIC_FILES: Dict[Music, str] = {
    Music.TITLE_BG_MUSIC: "Assets/Music/TitleBGMusic.wav",
}


def _read_bytes(path: Path) -> bytes:
    return Path(path).read_bytes()


class ResourceManager:
    """Holds resources by key; each is produced by a loader when loaded."""

    def __init__(self, loader: Callable[..., Any] = _read_bytes) -> None:
        self._loader = loader
        self._items: Dict[Hashable, Any] = {}

    def load(self, key: Hashable, *args: Any) -> Any:
        """Load a resource with the loader and store it under key."""
        resource = self._loader(*args)
        self._items[key] = resource
        return resource

    def get(self, key: Hashable) -> Any:
        """Return the resource stored under key."""
        try:
            return self._items[key]
        except KeyError:
            raise KeyError(f"no resource loaded for {key!r}") from None

    def unload(self, key: Hashable) -> None:
        """Drop the resource stored under key."""
        try:
            del self._items[key]
        except KeyError:
            raise KeyError(f"no resource loaded for {key!r}") from None

    def unload_all(self) -> None:
        """Drop every resource."""
        self._items.clear()

    def clear(self) -> None:
        """Drop every resource."""
        self._items.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._items)


class Assets:
    """The game's texture, font, music and sound containers."""

    def __init__(
        self,
        root: str | Path = ".",
        loader: Callable[[Path], Any] = _read_bytes,
    ) -> None:
        self.root = Path(root)
        self._file_loader = loader
        self.textures = ResourceManager(self._load_file)
        self.fonts = ResourceManager(self._load_file)
        self.music = ResourceManager(self._load_file)
        self.sounds = ResourceManager(self._load_file)

    def _load_file(self, relative: str) -> Any:
        return self._file_loader(self.root / relative)

    def initialize(self) -> None:
        """Load every resource the game needs."""
        self.textures.clear()
        self.textures.clear()
        for key, relative in TEXTURE_FILES.items():
            self.textures.load(key, relative)
        self.fonts.clear()
        for key, relative in FONT_FILES.items():
            self.fonts.load(key, relative)
        self.music.clear()
        for key, relative in MUSIC_FILES.items():
            self.music.load(key, relative)
        self.sounds.clear()

    def uninitialize(self) -> None:
        """Release the textures."""
        self.textures.unload_all()