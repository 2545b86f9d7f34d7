from __future__ import annotations

from pathlib import Path

from gitinstall.platform.detection import Platform, detect_platform
from gitinstall.platform.distro import (
    DistributionInfo,
    DistroDetector,
    debian_codename,
    parse_key_value,
)
from gitinstall.services.plan import DistroFamily, family_for
from gitinstall.test.fakes import RecordingRunner, completed, which_from


def _etc(root: Path, files: dict[str, str]) -> Path:
    etc = root / "etc"
    etc.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (etc / name).write_text(content, encoding="utf-8")
    return root


UBUNTU_OS_RELEASE = """\
PRETTY_NAME="Ubuntu 22.04.4 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
"""


def test_parse_key_value_handles_quotes_and_comments() -> None:
    values = parse_key_value(
        '# comment\n\nID="centos"\nVERSION_ID=\'7\'\nNAME=Fedora Linux\ngarbage line\n'
    )
    assert values == {"ID": "centos", "VERSION_ID": "7", "NAME": "Fedora Linux"}


def test_debian_codename_mapping() -> None:
    assert debian_codename("12.5\n") == "bookworm"
    assert debian_codename("11.9") == "bullseye"
    assert debian_codename("10.13") == "buster"
    assert debian_codename("bookworm/sid") == "bookworm"
    assert debian_codename("9.13") == "9"


def test_distribution_id_is_lowercased() -> None:
    info = DistributionInfo(id="Ubuntu", version="jammy")
    assert info.id == "ubuntu"
    assert family_for(info) is DistroFamily.APT_PPA


def test_missing_os_release_yields_empty_id(tmp_path: Path) -> None:
    detector = DistroDetector(root=tmp_path, runner=RecordingRunner(), which=which_from())
    info = detector.detect()
    assert info == DistributionInfo(id="", version="")
    assert family_for(info) is DistroFamily.UNSUPPORTED


def test_ubuntu_codename_from_lsb_release(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": UBUNTU_OS_RELEASE})
    runner = RecordingRunner(
        {
            ("lsb_release", "--codename"): completed("Codename:\tjammy\n"),
            ("lsb_release", "-a", "-u"): completed(returncode=1, stderr="lsb_release: upstream unknown"),
        }
    )
    detector = DistroDetector(root=root, runner=runner, which=which_from("lsb_release"))

    assert detector.detect() == DistributionInfo(id="ubuntu", version="jammy")


def test_ubuntu_codename_falls_back_to_lsb_release_file(tmp_path: Path) -> None:
    root = _etc(
        tmp_path,
        {
            "os-release": UBUNTU_OS_RELEASE,
            "lsb-release": "DISTRIB_ID=Ubuntu\nDISTRIB_CODENAME=noble\n",
        },
    )
    detector = DistroDetector(root=root, runner=RecordingRunner(), which=which_from())

    assert detector.detect() == DistributionInfo(id="ubuntu", version="noble")


def test_debian_version_maps_to_codename(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": 'ID="Debian"\n', "debian_version": "11.9\n"})
    detector = DistroDetector(root=root, runner=RecordingRunner(), which=which_from())

    assert detector.detect() == DistributionInfo(id="debian", version="bullseye")


def test_centos_uses_version_id(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": 'ID="centos"\nVERSION_ID="7"\n'})
    detector = DistroDetector(root=root, runner=RecordingRunner(), which=which_from())

    assert detector.detect() == DistributionInfo(id="centos", version="7")


def test_other_distros_prefer_lsb_release_number(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": "ID=fedora\nVERSION_ID=40\n"})
    runner = RecordingRunner(
        {
            ("lsb_release", "--release"): completed("Release:\t40.1\n"),
            ("lsb_release", "-a", "-u"): completed(returncode=1),
        }
    )
    detector = DistroDetector(root=root, runner=runner, which=which_from("lsb_release"))

    assert detector.detect() == DistributionInfo(id="fedora", version="40.1")


def test_fork_reports_upstream_distribution(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": "ID=linuxmint\nVERSION_ID=21.3\n"})
    upstream = (
        "Distributor ID:\tUbuntu\n"
        "Description:\tUbuntu 22.04 LTS\n"
        "Release:\t22.04\n"
        "Codename:\tjammy\n"
    )
    runner = RecordingRunner(
        {
            ("lsb_release", "-a", "-u"): completed(upstream, stderr="No LSB modules are available."),
            ("lsb_release", "--release"): completed("Release:\t21.3\n"),
        }
    )
    detector = DistroDetector(root=root, runner=runner, which=which_from("lsb_release"))

    assert detector.detect() == DistributionInfo(id="ubuntu", version="jammy")


def test_debian_derivative_falls_back_to_debian(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": "ID=kali\nVERSION_ID=2024.1\n", "debian_version": "12.4\n"})
    runner = RecordingRunner({("lsb_release", "-a", "-u"): completed(returncode=1)})
    detector = DistroDetector(root=root, runner=runner, which=which_from("lsb_release"))

    assert detector.detect() == DistributionInfo(id="debian", version="bookworm")


def test_raspbian_is_not_rewritten_by_fork_check(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": "ID=raspbian\n", "debian_version": "12.1\n"})
    runner = RecordingRunner({("lsb_release", "-a", "-u"): completed(returncode=1)})
    detector = DistroDetector(root=root, runner=runner, which=which_from("lsb_release"))

    assert detector.detect() == DistributionInfo(id="raspbian", version="bookworm")


def test_fork_check_is_skipped_without_lsb_release(tmp_path: Path) -> None:
    root = _etc(tmp_path, {"os-release": "ID=kali\nVERSION_ID=2024.1\n", "debian_version": "12.4\n"})
    runner = RecordingRunner()
    detector = DistroDetector(root=root, runner=runner, which=which_from())

    assert detector.detect() == DistributionInfo(id="kali", version="2024.1")
    assert runner.calls == []


def test_detect_platform_from_uname() -> None:
    assert detect_platform("Linux") is Platform.LINUX
    assert detect_platform("Darwin") is Platform.MACOS
    assert detect_platform("MSYS_NT-10.0") is Platform.WINDOWS
    assert detect_platform("SunOS") is Platform.UNKNOWN
