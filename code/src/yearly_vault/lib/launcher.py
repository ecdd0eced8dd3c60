"""Opening a vault in the Obsidian application.

Tries, in order:
1. the obsidian:// URI through the platform's URL opener
2. an ``obsidian`` executable found on PATH
3. Obsidian at well-known install locations for the platform

All process creation goes through a ProcessLauncher so that callers (and
tests) can substitute their own.
"""

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import quote

logger = logging.getLogger(__name__)

OBSIDIAN_URI = "obsidian://open?path={path}"
OBSIDIAN_EXECUTABLE = "obsidian"

# Seconds to wait for the URL opener to hand the URI over
OPENER_TIMEOUT = 30


class LaunchError(Exception):
    """Raised when a launch attempt fails."""

    pass


def obsidian_uri(path: Path) -> str:
    """Build the obsidian:// URI opening the vault at path.

    Examples:
        >>> obsidian_uri(Path("/vaults/Vault 2026"))
        'obsidian://open?path=%2Fvaults%2FVault%202026'
    """
    return OBSIDIAN_URI.format(path=quote(str(path), safe=""))


def default_install_locations(platform: Optional[str] = None) -> list[Path]:
    """Well-known Obsidian executables for a platform, most likely first."""
    if platform is None:
        platform = sys.platform
    home = Path.home()

    if platform == "win32":
        local_app_data = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        program_files = Path(os.environ.get("ProgramFiles", "C:\\Program Files"))
        return [
            local_app_data / "Obsidian" / "Obsidian.exe",
            local_app_data / "Programs" / "Obsidian" / "Obsidian.exe",
            program_files / "Obsidian" / "Obsidian.exe",
        ]
    if platform == "darwin":
        return [
            Path("/Applications/Obsidian.app/Contents/MacOS/Obsidian"),
            home / "Applications" / "Obsidian.app" / "Contents" / "MacOS" / "Obsidian",
        ]
    return [
        Path("/usr/bin/obsidian"),
        Path("/opt/Obsidian/obsidian"),
        home / ".local" / "bin" / "obsidian",
        Path("/var/lib/flatpak/exports/bin/md.obsidian.Obsidian"),
        Path("/snap/bin/obsidian"),
    ]


class ProcessLauncher:
    """Starts external processes on behalf of the open hook."""

    def __init__(self, platform: Optional[str] = None):
        self.platform = platform or sys.platform

    def open_uri(self, uri: str) -> None:
        """Hand a URI to the platform's default handler.

        Raises:
            LaunchError: If the opener is missing or reports failure
        """
        try:
            if self.platform == "win32":
                os.startfile(uri)  # type: ignore[attr-defined]
                return
            opener = "open" if self.platform == "darwin" else "xdg-open"
            subprocess.run(
                [opener, uri],
                check=True,
                capture_output=True,
                timeout=OPENER_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise LaunchError(f"Could not open {uri}: {e}") from e

    def spawn(self, args: list[str]) -> None:
        """Start a detached process.

        Raises:
            LaunchError: If the process cannot be started
        """
        try:
            subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise LaunchError(f"Could not start {args[0]}: {e}") from e

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def is_file(self, path: Path) -> bool:
        return path.is_file()


def open_vault(
    path: Path,
    launcher: Optional[ProcessLauncher] = None,
    install_locations: Optional[list[Path]] = None,
) -> bool:
    """Open the vault at path in Obsidian.

    Never raises; if every method fails a warning explains how to open the
    vault by hand.

    Args:
        path: Vault directory
        launcher: Process launcher (default: ProcessLauncher())
        install_locations: Executables tried last (default: platform defaults)

    Returns:
        True if one of the methods succeeded
    """
    if launcher is None:
        launcher = ProcessLauncher()
    if install_locations is None:
        install_locations = default_install_locations(launcher.platform)

    vault_path = path.resolve()

    uri = obsidian_uri(vault_path)
    try:
        launcher.open_uri(uri)
        logger.info(f"Opened vault in Obsidian: {uri}")
        return True
    except LaunchError as e:
        logger.debug(f"URI launch failed: {e}")

    executable = launcher.which(OBSIDIAN_EXECUTABLE)
    if executable:
        try:
            launcher.spawn([executable, str(vault_path)])
            logger.info(f"Opened vault with {executable}")
            return True
        except LaunchError as e:
            logger.debug(f"PATH launch failed: {e}")

    for location in install_locations:
        if not launcher.is_file(location):
            continue
        try:
            launcher.spawn([str(location), str(vault_path)])
            logger.info(f"Opened vault with {location}")
            return True
        except LaunchError as e:
            logger.debug(f"Launch from {location} failed: {e}")
        break

    logger.warning(
        f"Could not open Obsidian automatically. Open Obsidian, choose "
        f"'Open folder as vault' and select: {vault_path}"
    )
    return False
