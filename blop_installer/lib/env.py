from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    keymap_dir: str = "/usr/share/kbd/keymaps"
    config_default: str = "/etc/blop-installer.yaml"
    log_default: str = "/var/log/blop-installer.log"


PATHS = Paths()

KEYMAP_SUFFIX = ".map.gz"
PRIVILEGE_HINT = "are you running as an elevated user?"
DISK_TOOLS = ("fdisk", "gdisk", "parted")
