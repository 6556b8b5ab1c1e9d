"""Plain HTTP download of a file into a local directory."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from urllib.parse import urlsplit

import requests
from tqdm import tqdm

_CHUNK_SIZE = 32 * 1024


@dataclass
class Downloader:
    """Downloads files into local_path, showing a progress bar."""

    local_path: str

    def download(self, url: str) -> str:
        """Fetch url into local_path and return the path of the saved file.

        Raises FileNotFoundError when the server answers 404.
        """
        with requests.get(url, stream=True) as response:
            if response.status_code == 404:
                raise FileNotFoundError("source file not found")
            path = os.path.join(self.local_path, posixpath.basename(urlsplit(url).path))
            length = response.headers.get("Content-Length")
            total = int(length) if length and length.isdigit() else None
            with open(path, "wb") as out, tqdm(
                total=total, unit="B", unit_scale=True, desc="Downloading"
            ) as bar:
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    out.write(chunk)
                    bar.update(len(chunk))
        return path