#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import posixpath
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from fsspec.core import url_to_fs

if TYPE_CHECKING:
    from fsspec.spec import AbstractFileSystem

from .types import PathLike

###############################################################################

log = logging.getLogger(__name__)

###############################################################################


def pathlike_to_fs(
    uri: PathLike,
    fs_kwargs: Optional[Dict[str, Any]] = None,
) -> Tuple["AbstractFileSystem", str]:
    """
    Find and return the appropriate filesystem and path from a path-like object.

    Parameters
    ----------
    uri: PathLike
        The local or remote path or uri.
    fs_kwargs: Optional[Dict[str, Any]]
        Any specific keyword arguments to pass down to the fsspec created filesystem.
        Default: None

    Returns
    -------
    fs: AbstractFileSystem
        The filesystem to operate on.
    path: str
        The full path to the target resource, without protocol.
    """
    # Convert paths to string to be handled by url_to_fs
    if isinstance(uri, Path):
        uri = str(uri)

    fs, path = url_to_fs(uri, **(fs_kwargs or {}))
    return fs, path


def split_save_location(
    uri: PathLike,
    fs_kwargs: Optional[Dict[str, Any]] = None,
) -> Tuple[str, str]:
    """
    Split a save location into the directory it lives in and its file name.

    Nothing is read from or written to the filesystem.

    Parameters
    ----------
    uri: PathLike
        The local or remote path or uri of the saved dataset.
    fs_kwargs: Optional[Dict[str, Any]]
        Any specific keyword arguments to pass down to the fsspec created filesystem.
        Default: None

    Returns
    -------
    directory: str
        The parent directory. Remote locations keep their protocol
        (e.g. "s3://bucket/experiments").
    file_name: str
        The final path component.
    """
    fs, path = pathlike_to_fs(uri, fs_kwargs=fs_kwargs)

    # fsspec normalizes to "/" separated paths for every filesystem
    parent, file_name = posixpath.split(path.rstrip("/"))
    directory = fs.unstrip_protocol(parent) if _is_remote(fs) else parent
    log.debug(f"Resolved save location {uri} to ({directory}, {file_name})")
    return directory, file_name


def _is_remote(fs: "AbstractFileSystem") -> bool:
    protocols = fs.protocol if isinstance(fs.protocol, tuple) else (fs.protocol,)
    return not any(p in ("file", "local") for p in protocols)
