from __future__ import annotations

import getopt

import pytest

from optdemos.getsubopt_demo import MountOptionError, MountOptions, main, parse_mount_args


def test_rsize_and_read_only(capsys: pytest.CaptureFixture[str]) -> None:
    options = parse_mount_args(["-o", "rsize=4096,ro"])

    assert options.read_only is True
    assert options.read_size == 4096
    assert options.write_size == 0
    assert capsys.readouterr().out == ""


def test_main_is_silent_on_success(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-o", "rsize=4096,ro"]) == 0
    assert capsys.readouterr() == ("", "")


def test_defaults() -> None:
    assert parse_mount_args([]) == MountOptions()


def test_all_flags() -> None:
    options = parse_mount_args(["-a", "-t", "nfs", "-o", "wsize=8192", "-o", "rsize=1024"])

    assert options == MountOptions(
        do_all=True, type="nfs", read_size=1024, write_size=8192, read_only=False
    )


@pytest.mark.parametrize(
    ("argv", "read_only"),
    [
        (["-o", "ro,rw"], False),
        (["-o", "rw,ro"], True),
        (["-o", "ro", "-o", "rw"], False),
    ],
)
def test_last_occurrence_wins(argv: list[str], read_only: bool) -> None:
    assert parse_mount_args(argv).read_only is read_only


def test_repeated_type_keeps_last() -> None:
    assert parse_mount_args(["-t", "nfs", "-t", "ext4"]).type == "ext4"


@pytest.mark.parametrize(
    ("subopts", "read_size"),
    [("rsize=", 0), ("rsize=12k", 12), ("rsize= 8", 8), ("rsize=x", 0)],
)
def test_sizes_use_atoi(subopts: str, read_size: int) -> None:
    assert parse_mount_args(["-o", subopts]).read_size == read_size


def test_positional_arguments_are_ignored() -> None:
    options = parse_mount_args(["/mnt", "-a", "extra"])
    assert options == MountOptions(do_all=True)


def test_unknown_suboption_is_reported_and_skipped(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-o", "bogus"]) == 0
    assert capsys.readouterr().out == "Unknown suboption `bogus'\n"


def test_unknown_suboption_keeps_parsing(capsys: pytest.CaptureFixture[str]) -> None:
    options = parse_mount_args(["-o", "foo=1,ro,,wsize=2"])

    assert options.read_only is True
    assert options.write_size == 2
    assert capsys.readouterr().out.splitlines() == [
        "Unknown suboption `foo=1'",
        "Unknown suboption `'",
    ]


@pytest.mark.parametrize("subopts", ["rsize", "wsize", "ro,wsize"])
def test_size_without_value_is_fatal(subopts: str) -> None:
    with pytest.raises(MountOptionError):
        parse_mount_args(["-o", subopts])


@pytest.mark.parametrize("argv", [["-z"], ["-t"], ["-o"], ["--long"]])
def test_bad_outer_option_is_fatal(argv: list[str]) -> None:
    with pytest.raises(getopt.GetoptError):
        parse_mount_args(argv)


@pytest.mark.parametrize("argv", [["-z"], ["-o", "rsize"]])
def test_main_aborts_without_message(
    argv: list[str], fake_abort: type[Exception], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(fake_abort):
        main(argv)

    assert capsys.readouterr() == ("", "")


@pytest.mark.parametrize(
    ("argv", "expected_out"),
    [
        (["-o", "bogus", "-z"], ["Unknown suboption `bogus'"]),
        (["-o", "foo", "-o", "bar", "-t"], ["Unknown suboption `foo'", "Unknown suboption `bar'"]),
        (["-o", "bogus,rsize"], ["Unknown suboption `bogus'"]),
        (["-z", "-o", "bogus"], []),
    ],
)
def test_output_before_a_fatal_error_is_kept(
    argv: list[str],
    expected_out: list[str],
    fake_abort: type[Exception],
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(fake_abort):
        main(argv)

    out, err = capsys.readouterr()
    assert out.splitlines() == expected_out
    assert err == ""


def test_unknown_suboption_uses_the_whole_piece(capsys: pytest.CaptureFixture[str]) -> None:
    parse_mount_args(["-o", "ro=1,rwx=2"])

    assert capsys.readouterr().out.splitlines() == ["Unknown suboption `rwx=2'"]
