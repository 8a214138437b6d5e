"""Pinned bootstrap version and artifact checksums.

Every entry belongs to ``BOOTSTRAP_VERSION``. When the pinned version is
bumped, all digests must be replaced from the release's checksums file.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

BOOTSTRAP_VERSION = "v2.55.1"

# SHA-256 digests of the aqua v2.55.1 release archives
CHECKSUMS: Mapping[str, str] = MappingProxyType({
    "aqua_darwin_amd64.tar.gz": "814bd2ba3b1db409e89eae126ad280413e4edfefe91f598ce173c3b21ba56ca8",
    "aqua_darwin_arm64.tar.gz": "cdaa13dd96187622ef5bee52867c46d4cf10765963423dc8e867c7c4decccf4d",
    "aqua_linux_amd64.tar.gz": "7371b9785e07c429608a21e4d5b17dafe6780dabe306ec9f4be842ea754de48a",
    "aqua_linux_arm64.tar.gz": "283e0e274af47ff1d4d660a19e8084ae4b6aca23d901e95728a68a63dfb98c87",
    "aqua_windows_amd64.zip": "3efa0eaecd4f252f9dcf0d3b723e77894657977dc91939aac7697380a3f476a1",
    "aqua_windows_arm64.zip": "faf478d4db6e873ed85365e6864af31bf831317a1736b4ca7f3cf561e3a463ec",
})
