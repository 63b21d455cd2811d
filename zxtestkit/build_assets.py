"""Build the test assets inside a z88dk Docker container."""

from __future__ import annotations

import argparse
import secrets
import subprocess
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Sequence

DOCKER_IMAGE_REPO = "https://github.com/z88dk/z88dk.git"
DOCKER_IMAGE_COMMIT = "d61f6bb46ec15775cccf543f5941b6a2d6864ecf"
DOCKER_IMAGE_NAME = "rustzx/z88dk"
DOCKER_IMAGE_FILE = "z88dk.Dockerfile"

HEX_ALPHABET = "1234567890abcdef"
SHORTENED_COMMIT_LENGTH = 7
CONTAINER_ID_LENGTH = 8


class CommandError(RuntimeError):
    """Raised when an external command cannot be started or fails."""


def image_tagged_name(name: str, tag: str) -> str:
    """Return ``name:tag`` with the tag shortened to a short commit hash."""
    return f"{name}:{tag[:SHORTENED_COMMIT_LENGTH]}"


def to_container_name(prefix: str) -> str:
    """Return ``prefix`` followed by a random hexadecimal suffix."""
    suffix = "".join(secrets.choice(HEX_ALPHABET) for _ in range(CONTAINER_ID_LENGTH))
    return f"{prefix}-{suffix}"


def execute_command_transparent(cmd: Sequence[str]) -> None:
    """Run ``cmd`` with inherited standard streams; raise if it fails."""
    args = list(cmd)
    print(f"Running command with args: {args!r}")
    try:
        completed = subprocess.run(args, check=False)
    except OSError as exc:
        raise CommandError(f"Failed to start command {args[0]!r}: {exc}") from exc
    if completed.returncode != 0:
        raise CommandError(
            f"Command execution failed with code {completed.returncode}"
        )


@dataclass(frozen=True)
class DockerMountPoint:
    """A host directory mounted at a path inside the container.

    The mount path is kept as a plain string, since the container's
    operating system may differ from the host's.
    """

    dir: Path
    mount: str


@dataclass(frozen=True)
class DockerContainer:
    """Description of a ``docker run`` invocation."""

    image: str
    name: str | None = None
    mount_points: tuple[DockerMountPoint, ...] = field(default_factory=tuple)
    remove: bool = False
    script: str | None = None

    @classmethod
    def from_image(cls, image: str) -> DockerContainer:
        return cls(image=image)

    def with_name(self, name: str) -> DockerContainer:
        return replace(self, name=name)

    def mount(self, mount_point: DockerMountPoint) -> DockerContainer:
        return replace(self, mount_points=self.mount_points + (mount_point,))

    def remove_after_run(self) -> DockerContainer:
        return replace(self, remove=True)

    def startup_script(self, path: str) -> DockerContainer:
        """Run the shell script at ``path`` (inside the container) on start."""
        return replace(self, script=path)

    def command(self) -> list[str]:
        """Return the full ``docker run`` command line."""
        cmd = ["docker", "run"]
        if self.name is not None:
            cmd += ["--name", self.name]
        for mount_point in self.mount_points:
            cmd += ["-v", f"{mount_point.dir}:{mount_point.mount}"]
        if self.remove:
            cmd.append("--rm")
        if self.script is not None:
            cmd.append("-it")
        cmd.append(self.image)
        if self.script is not None:
            cmd += ["sh", self.script]
        return cmd

    def run(self) -> None:
        execute_command_transparent(self.command())


@dataclass(frozen=True)
class DockerImage:
    """Description of a ``docker build`` from a git repository."""

    url: str
    name: str | None = None
    dockerfile: str | None = None

    @staticmethod
    def present_on_machine(image_name: str) -> bool:
        """Return True if Docker already has an image called ``image_name``."""
        try:
            completed = subprocess.run(
                ["docker", "images", "-q", image_name],
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise CommandError(f"Failed to query docker images: {exc}") from exc
        try:
            output = completed.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CommandError("Failed to parse docker stdout") from exc
        return output != ""

    @classmethod
    def from_git(cls, repo: str, commit: str) -> DockerImage:
        return cls(url=f"{repo}#{commit}")

    def with_name(self, name: str) -> DockerImage:
        return replace(self, name=name)

    def with_dockerfile(self, dockerfile: str) -> DockerImage:
        return replace(self, dockerfile=dockerfile)

    def command(self) -> list[str]:
        """Return the full ``docker build`` command line."""
        cmd = ["docker", "build"]
        if self.dockerfile is not None:
            cmd += ["-f", self.dockerfile]
        if self.name is not None:
            cmd += ["-t", self.name]
        cmd.append(self.url)
        return cmd

    def build(self) -> None:
        execute_command_transparent(self.command())


def main(argv: Sequence[str] | None = None) -> int:
    """Build the z88dk image if needed, then compile the assets in a container."""
    parser = argparse.ArgumentParser(
        prog="build-assets",
        description="Build test assets with z88dk inside Docker.",
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        default=Path.cwd() / "test_data",
        help="directory holding the asset sources and make.sh",
    )
    args = parser.parse_args(argv)

    tagged = image_tagged_name(DOCKER_IMAGE_NAME, DOCKER_IMAGE_COMMIT)
    try:
        if not DockerImage.present_on_machine(DOCKER_IMAGE_NAME):
            try:
                (
                    DockerImage.from_git(DOCKER_IMAGE_REPO, DOCKER_IMAGE_COMMIT)
                    .with_name(tagged)
                    .with_dockerfile(DOCKER_IMAGE_FILE)
                    .build()
                )
            except CommandError as exc:
                raise CommandError(f"Failed to build docker image: {exc}") from exc

        try:
            (
                DockerContainer.from_image(tagged)
                .with_name(to_container_name("rustzx-assets"))
                .mount(DockerMountPoint(dir=args.assets_dir, mount="/src/"))
                .remove_after_run()
                .startup_script("/src/make.sh")
                .run()
            )
        except CommandError as exc:
            raise CommandError(f"Failed to build assets: {exc}") from exc
    except CommandError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())