"""Browsh installer for Ubuntu/Debian (apt + GitHub release .deb)."""

import argparse
import os
import subprocess
from pathlib import Path
from typing import List

import requests

LATEST_RELEASE_API = "https://api.github.com/repos/browsh-org/browsh/releases/latest"
DOWNLOAD_URL_TEMPLATE = (
    "https://github.com/browsh-org/browsh/releases/download/{tag}/browsh_{version}_linux_{arch}.deb"
)
DEB_PATH = Path("/tmp/browsh.deb")


def _sudo() -> List[str]:
    """Prefix commands with sudo unless we already run as root."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is not None and geteuid() == 0:
        return []
    return ["sudo"]


def run_step(cmd: List[str], dry_run: bool = False):
    """Run a command and abort on the first failure (check=True)."""
    print(f"$ {' '.join(cmd)}")
    if dry_run:
        return None
    return subprocess.run(cmd, check=True)


def fetch_latest_tag(timeout: int = 15) -> str:
    resp = requests.get(
        LATEST_RELEASE_API,
        headers={"Accept": "application/vnd.github+json"},
        timeout=timeout,
    )
    if resp.status_code >= 400:
        raise RuntimeError(f"GitHub respondeu {resp.status_code}: {resp.text[:200]}")
    data = resp.json()
    if not isinstance(data, dict):
        raise RuntimeError(f"Resposta inesperada do GitHub: {str(data)[:200]}")
    tag = data.get("tag_name")
    if not tag:
        raise RuntimeError("Resposta do GitHub sem 'tag_name'.")
    return tag


def build_download_url(tag: str, arch: str = "amd64") -> str:
    """Build the .deb URL; only a leading 'v' is stripped from the tag for the file name."""
    version = tag[1:] if tag.startswith("v") else tag
    return DOWNLOAD_URL_TEMPLATE.format(tag=tag, version=version, arch=arch)


def download_file(url: str, dest: Path = DEB_PATH, timeout: int = 120) -> Path:
    dest = Path(dest)
    with requests.get(url, stream=True, timeout=timeout) as resp:
        if resp.status_code >= 400:
            raise RuntimeError(f"Download respondeu {resp.status_code}: {url}")
        with open(dest, "wb") as fh:
            for chunk in resp.iter_content(chunk_size=64 * 1024):
                if chunk:
                    fh.write(chunk)
    return dest


def install_browsh(dry_run: bool = False, arch: str = "amd64", deb_path: Path = DEB_PATH) -> str:
    """
    Instala o Browsh passo a passo e retorna a versão instalada.

    Qualquer passo que falhe interrompe a instalação; o .deb temporário só é
    removido ao final de uma execução completa.
    """
    sudo = _sudo()
    deb_path = Path(deb_path)

    print("🌐 Installing Browsh on Ubuntu")
    print("==============================")

    print("📦 Updating package list...")
    run_step(sudo + ["apt", "update"], dry_run)

    print("📦 Installing Firefox (required for Browsh)...")
    run_step(sudo + ["apt", "install", "-y", "firefox"], dry_run)

    print("📦 Installing dependencies...")
    run_step(sudo + ["apt", "install", "-y", "wget", "curl"], dry_run)

    print("🔍 Getting latest Browsh version...")
    tag = fetch_latest_tag()
    print(f"Latest version: {tag}")

    url = build_download_url(tag, arch=arch)
    print("⬇️  Downloading Browsh...")
    print(url)
    if not dry_run:
        download_file(url, deb_path)

    print("📦 Installing Browsh...")
    run_step(sudo + ["dpkg", "-i", str(deb_path)], dry_run)
    run_step(sudo + ["apt-get", "install", "-f", "-y"], dry_run)

    print("🧹 Cleaning up...")
    if not dry_run:
        deb_path.unlink(missing_ok=True)

    print("✅ Browsh installation complete!")
    print("")
    print("🚀 To start Browsh, run: browsh")
    print("📖 For help, run: browsh --help")
    print("⌨️  Use Ctrl+Q to quit Browsh")
    return tag


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Install the Browsh terminal browser.")
    ap.add_argument("--dry-run", action="store_true", help="print commands without running them")
    ap.add_argument("--arch", default="amd64", help="release architecture (default: amd64)")
    args = ap.parse_args(argv)
    install_browsh(dry_run=args.dry_run, arch=args.arch)


if __name__ == "__main__":
    main()
