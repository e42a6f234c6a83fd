"""
Resolution of SARIF physical locations to local source files.
"""

import asyncio
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from ..core.errors import ResolutionError
from ..core.models import ResolvedLocation

REGION_FIELDS = ('startLine', 'startColumn', 'endLine', 'endColumn')


class LocationResolver:
    """
    Maps physicalLocation descriptors onto files below a source root.

    A descriptor whose file cannot be found still resolves, to a not-mapped
    ResolvedLocation that keeps the descriptor so it can be retried later.

    Args:
        source_root: Directory relative URIs without a uriBaseId are joined to
        uri_base_ids: Mapping of uriBaseId -> directory path or file:// URI
    """

    def __init__(self, source_root: str, uri_base_ids: Optional[Dict[str, str]] = None):
        self.source_root = Path(source_root)
        self.uri_base_ids = dict(uri_base_ids or {})

    @staticmethod
    def collect_uri_base_ids(original_uri_base_ids: Optional[Dict]) -> Dict[str, str]:
        """
        Flatten a run's originalUriBaseIds ({"SRCROOT": {"uri": "file:///src/"}})
        into a uriBaseId -> URI mapping. Entries without a uri are dropped.
        """
        base_ids = {}
        for base_id, artifact in (original_uri_base_ids or {}).items():
            if isinstance(artifact, dict) and artifact.get('uri'):
                base_ids[base_id] = artifact['uri']
        return base_ids

    async def resolve(self, physical_location: Optional[Dict]) -> Optional[ResolvedLocation]:
        """
        Resolve a physicalLocation descriptor.

        Args:
            physical_location: SARIF physicalLocation dictionary

        Returns:
            ResolvedLocation (mapped or not), or None when there is no descriptor

        Raises:
            ResolutionError: If the descriptor or its region is malformed
        """
        if physical_location is None:
            return None
        if not isinstance(physical_location, dict):
            raise ResolutionError(f"Invalid physicalLocation: {physical_location!r}")

        artifact = physical_location.get('artifactLocation') or {}
        uri = artifact.get('uri')
        uri_base_id = artifact.get('uriBaseId')
        region = self._read_region(physical_location.get('region') or {})

        file_path = self._local_path(uri, uri_base_id)
        mapped = False
        if file_path is not None:
            mapped = await asyncio.to_thread(file_path.is_file)

        return ResolvedLocation(
            uri=uri,
            mapped=mapped,
            file_path=str(file_path) if mapped else None,
            uri_base_id=uri_base_id,
            physical_location=physical_location,
            **region
        )

    @staticmethod
    def _read_region(region: Dict) -> Dict[str, Optional[int]]:
        """Read a SARIF region, defaulting startColumn to 1 and endLine to startLine."""
        values = {}
        for key in REGION_FIELDS:
            value = region.get(key)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                raise ResolutionError(f"Invalid region.{key}: {value!r}")
            values[key] = value

        start_line = values['startLine']
        return {
            'start_line': start_line,
            'start_column': values['startColumn'] or (1 if start_line is not None else None),
            'end_line': values['endLine'] or start_line,
            'end_column': values['endColumn'],
        }

    def _local_path(self, uri: Optional[str], uri_base_id: Optional[str]) -> Optional[Path]:
        """Build the local path for an artifact URI, or None if it cannot be placed."""
        if not uri:
            return None

        parsed = urlparse(uri)
        if parsed.scheme == 'file':
            return Path(url2pathname(parsed.path))
        if parsed.scheme and len(parsed.scheme) > 1:
            # http(s) and other remote artifacts
            return None

        relative = unquote(uri)
        if uri_base_id:
            base = self.uri_base_ids.get(uri_base_id)
            if base is None:
                return None
            base_path = self._base_path(base)
            if base_path is None:
                return None
            return base_path / relative

        return self.source_root / relative

    @staticmethod
    def _base_path(base: str) -> Optional[Path]:
        parsed = urlparse(base)
        if parsed.scheme == 'file':
            return Path(url2pathname(parsed.path))
        if parsed.scheme and len(parsed.scheme) > 1:
            return None
        return Path(unquote(base))
