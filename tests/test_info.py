import io

from cbormodel.info import PREFIX, banner_lines, main, print_banner, print_vector


def test_banner_first_line_greets():
    first = banner_lines()[0]
    assert first.startswith(f"{PREFIX}: Hello World ")
    assert first.endswith("!")


def test_banner_build_kind_is_known():
    first = banner_lines()[0]
    kind = first[len(f"{PREFIX}: Hello World ") : -1]
    assert kind in {"Debug", "Release"}


def test_banner_detail_lines_are_indented():
    details = banner_lines()[1:]
    assert len(details) >= 2
    assert all(line.startswith(f"  {PREFIX}: ") for line in details)


def test_print_banner_writes_banner_lines():
    buf = io.StringIO()
    print_banner(buf)
    assert buf.getvalue().splitlines() == banner_lines()


def test_print_vector_prefixes_each_string():
    buf = io.StringIO()
    print_vector(["alpha", "beta"], buf)
    assert buf.getvalue().splitlines() == [f"{PREFIX} alpha", f"{PREFIX} beta"]


def test_print_vector_empty_writes_nothing():
    buf = io.StringIO()
    print_vector([], buf)
    assert buf.getvalue() == ""


def test_print_vector_accepts_generator():
    buf = io.StringIO()
    print_vector((s for s in ["x"]), buf)
    assert buf.getvalue() == f"{PREFIX} x\n"


def test_main_default_prints_test_package(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[: len(banner_lines())] == banner_lines()
    assert lines[-1] == f"{PREFIX} test_package"


def test_main_with_arguments(capsys):
    assert main(["one", "two"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == [f"{PREFIX} one", f"{PREFIX} two"]
    assert f"{PREFIX} test_package" not in lines