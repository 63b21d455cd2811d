import subprocess
from pathlib import Path
from unittest import mock

import pytest

from zxtestkit.build_assets import (
    DOCKER_IMAGE_COMMIT,
    DOCKER_IMAGE_NAME,
    HEX_ALPHABET,
    CommandError,
    DockerContainer,
    DockerImage,
    DockerMountPoint,
    execute_command_transparent,
    image_tagged_name,
    main,
    to_container_name,
)


def _done(args, returncode=0, stdout=b""):
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=b"")


def test_image_tagged_name_shortens_commit():
    assert image_tagged_name(DOCKER_IMAGE_NAME, DOCKER_IMAGE_COMMIT) == "rustzx/z88dk:d61f6bb"


def test_image_tagged_name_short_tag_kept():
    assert image_tagged_name("img", "abc") == "img:abc"


def test_to_container_name_shape():
    name = to_container_name("rustzx-assets")
    prefix, suffix = name.rsplit("-", 1)
    assert prefix == "rustzx-assets"
    assert len(suffix) == 8
    assert set(suffix) <= set(HEX_ALPHABET)


def test_container_command_full():
    container = (
        DockerContainer.from_image("img:tag")
        .with_name("box")
        .mount(DockerMountPoint(dir=Path("/host/data"), mount="/src/"))
        .remove_after_run()
        .startup_script("/src/make.sh")
    )
    assert container.command() == [
        "docker", "run", "--name", "box", "-v", f"{Path('/host/data')}:/src/",
        "--rm", "-it", "img:tag", "sh", "/src/make.sh",
    ]


def test_container_command_minimal():
    assert DockerContainer.from_image("img").command() == ["docker", "run", "img"]


def test_container_builders_do_not_mutate():
    base = DockerContainer.from_image("img")
    base.with_name("x").remove_after_run()
    assert base.command() == ["docker", "run", "img"]


def test_container_multiple_mounts_in_order():
    container = (
        DockerContainer.from_image("img")
        .mount(DockerMountPoint(Path("a"), "/a"))
        .mount(DockerMountPoint(Path("b"), "/b"))
    )
    cmd = container.command()
    assert cmd[2:6] == ["-v", "a:/a", "-v", "b:/b"]


def test_image_command():
    image = (
        DockerImage.from_git("repo.git", "abc")
        .with_name("img:abc")
        .with_dockerfile("z.Dockerfile")
    )
    assert image.command() == [
        "docker", "build", "-f", "z.Dockerfile", "-t", "img:abc", "repo.git#abc",
    ]


def test_image_from_git_url():
    assert DockerImage.from_git("r", "c").url == "r#c"


def test_present_on_machine_true():
    with mock.patch.object(subprocess, "run", return_value=_done([], stdout=b"0123abcd\n")) as run:
        assert DockerImage.present_on_machine("img") is True
    assert run.call_args.args[0] == ["docker", "images", "-q", "img"]


def test_present_on_machine_false():
    with mock.patch.object(subprocess, "run", return_value=_done([], stdout=b"")):
        assert DockerImage.present_on_machine("img") is False


def test_present_on_machine_docker_missing():
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError("docker")):
        with pytest.raises(CommandError):
            DockerImage.present_on_machine("img")


def test_execute_command_failure_raises():
    with mock.patch.object(subprocess, "run", return_value=_done(["x"], returncode=3)):
        with pytest.raises(CommandError, match="code 3"):
            execute_command_transparent(["x"])


def test_execute_command_success(capsys):
    with mock.patch.object(subprocess, "run", return_value=_done(["echo"])) as run:
        execute_command_transparent(["echo", "hi"])
    assert run.call_args.args[0] == ["echo", "hi"]
    assert "Running command with args" in capsys.readouterr().out


def test_container_run_executes_command():
    container = DockerContainer.from_image("img").remove_after_run()
    with mock.patch.object(subprocess, "run", return_value=_done([])) as run:
        container.run()
    assert run.call_args.args[0] == ["docker", "run", "--rm", "img"]
    with mock.patch.object(subprocess, "run", return_value=_done([], returncode=2)):
        with pytest.raises(CommandError, match="code 2"):
            container.run()


def test_image_build_runs_once():
    image = DockerImage.from_git("r", "c")
    with mock.patch.object(subprocess, "run", return_value=_done([])) as run:
        image.build()
    assert run.call_count == 1
    assert run.call_args.args[0] == ["docker", "build", "r#c"]
    with mock.patch.object(subprocess, "run", return_value=_done([], returncode=4)):
        with pytest.raises(CommandError, match="code 4"):
            image.build()


def test_main_builds_image_when_missing(tmp_path):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return _done(args, stdout=b"")

    with mock.patch.object(subprocess, "run", side_effect=fake_run):
        assert main(["--assets-dir", str(tmp_path)]) == 0

    assert calls[0] == ["docker", "images", "-q", DOCKER_IMAGE_NAME]
    assert calls[1][:2] == ["docker", "build"]
    assert calls[1][-1] == f"https://github.com/z88dk/z88dk.git#{DOCKER_IMAGE_COMMIT}"
    assert calls[2][:2] == ["docker", "run"]
    assert f"{tmp_path}:/src/" in calls[2]
    assert calls[2][-2:] == ["sh", "/src/make.sh"]


def test_main_skips_build_when_present(tmp_path):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return _done(args, stdout=b"deadbeef\n")

    with mock.patch.object(subprocess, "run", side_effect=fake_run):
        assert main(["--assets-dir", str(tmp_path)]) == 0
    assert [c[1] for c in calls] == ["images", "run"]


def test_main_reports_failure(tmp_path):
    def fake_run(args, **kwargs):
        return _done(args, returncode=1 if args[1] == "run" else 0, stdout=b"x")

    with mock.patch.object(subprocess, "run", side_effect=fake_run):
        assert main(["--assets-dir", str(tmp_path)]) == 1