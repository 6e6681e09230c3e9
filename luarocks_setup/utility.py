import os
from pathlib import Path
import shlex
import subprocess
import tarfile
from typing import Any, Optional
import zipfile

from jinja2 import Environment, StrictUndefined
import requests
from tqdm import tqdm

_env = Environment(undefined=StrictUndefined, keep_trailing_newline=True)


def render(template: str, **values: Any) -> str:
    return _env.from_string(template).render(**values)


def extract_file(file_path: Path, out_path=Path(".")) -> None:
    print(f"Extracting '{file_path}'...")
    match file_path.suffixes[-2:]:
        case [".tar", ".gz"] | [_, ".tgz"] | [".tgz"]:
            with tarfile.open(file_path, "r:gz") as tar:
                tar.extractall(path=out_path, filter="data")
        case [_, ".tar"] | [".tar"]:
            with tarfile.open(file_path, "r:") as tar:
                tar.extractall(path=out_path, filter="data")
        case [_, ".zip"] | [".zip"]:
            with zipfile.ZipFile(file_path, "r") as zip_ref:
                zip_ref.extractall(out_path)
        case _:
            raise ValueError(f"Unsupported file type: {file_path}")


def download_file(url: str, out_path: Path, progress: bool = True) -> None:
    print(f"Downloading '{url}'...")
    with requests.get(url, stream=True) as response:
        response.raise_for_status()
        total_size = int(response.headers.get("content-length", 0))
        with (
            out_path.open("wb") as f,
            tqdm(
                total=total_size,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=f"Downloading {out_path.name}",
                disable=not progress,
            ) as bar,
        ):
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
                bar.update(len(chunk))


def run(cmd: list[str], cwd: Optional[Path] = None, capture: bool = False) -> str:
    print(f"Running {shlex.join(cmd)}")
    result = subprocess.run(
        cmd,
        cwd=cwd,
        check=True,
        stdout=subprocess.PIPE if capture else None,
        text=True,
    )
    return result.stdout if capture else ""


def select_by_os(unix: Any, windows: Any) -> Any:
    return windows if os.name == "nt" else unix
