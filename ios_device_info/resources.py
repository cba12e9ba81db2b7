from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedIcon:
    """An icon, together with the color token whose resource matched"""

    image: bytes
    color: str
    reference: str


class ResourceStore(Protocol):
    """Turns an icon resource reference into image data"""

    def fetch(self, reference: str) -> Optional[bytes]:
        ...


class NullResourceStore:
    """Has no resources at all"""

    def fetch(self, reference: str) -> Optional[bytes]:
        return None


class MappingResourceStore:
    """Resources held in memory, keyed by reference"""

    def __init__(self, resources: Mapping[str, bytes]):
        self.resources = dict(resources)

    def fetch(self, reference: str) -> Optional[bytes]:
        return self.resources.get(reference, None)


class DirectoryResourceStore:
    """Reads resources from files below a root directory. The
    reference is the path of the file relative to root"""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def fetch(self, reference: str) -> Optional[bytes]:
        try:
            root = self.root.resolve()
            path = (root / reference).resolve()
            if path != root and root not in path.parents:
                _LOGGER.warning("refusing resource %r outside of %s", reference, root)
                return None
            return path.read_bytes()
        except FileNotFoundError:
            _LOGGER.debug("no resource %s in %s", reference, self.root)
        except (OSError, RuntimeError, ValueError) as exc:
            # Embedded NULs, symlink loops and unreadable files
            _LOGGER.debug("unable to read resource %r", reference, exc_info=exc)
        return None
