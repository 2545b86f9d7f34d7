# SPDX-License-Identifier: MIT
"""Static tables for the installer.

Keep this file small and explicit: everything here is data, not behavior.
"""

from __future__ import annotations

__all__ = [
    "APT_HELPER_PACKAGE",
    "APT_PACKAGE_EPOCH",
    "DEBIAN_CODENAMES",
    "EOL_DELAY_SECONDS",
    "EOL_RELEASES",
    "EXISTING_INSTALL_DELAY_SECONDS",
    "GIT_PPA",
    "PACKAGE",
    "SCRIPT_COMMIT_SHA",
]


# Reported in the banner so bug reports can name the installer release.
SCRIPT_COMMIT_SHA = "git-script-v1.0.0"

PACKAGE = "git"

# Ubuntu gets the latest stable Git from the git-core PPA.
GIT_PPA = "ppa:git-core/ppa"
APT_HELPER_PACKAGE = "software-properties-common"

# Debian and Ubuntu ship git with epoch 1 (e.g. "1:2.39.2-1.1").
APT_PACKAGE_EPOCH = "1"

# /etc/debian_version major -> codename.
DEBIAN_CODENAMES: dict[str, str] = {
    "12": "bookworm",
    "11": "bullseye",
    "10": "buster",
}

# (id, version) pairs past end-of-life.
EOL_RELEASES: frozenset[tuple[str, str]] = frozenset(
    {
        ("centos", "7"),
        ("rhel", "7"),
        ("debian", "buster"),
        ("debian", "stretch"),
        ("ubuntu", "xenial"),
        ("ubuntu", "trusty"),
    }
)

EOL_DELAY_SECONDS = 10
EXISTING_INSTALL_DELAY_SECONDS = 5
