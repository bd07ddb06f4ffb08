" generic fixtures "
import pytest


def pytest_configure():
    "Runs once before all"
    from escolors.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def es_file(tmp_path):
    "An Endless Sky color file"
    path = tmp_path / "colors.txt"
    path.write_text(
        """# interface colors
color "Red" 1 0 0
color "Shield Blue" .4 .6 1. 0.
	# indented comment
	description "ignored child node"
color "Bad" 1 0
interface "not a color"
color `Half` .5 .5 .5 1
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def html_file(tmp_path):
    "An HTML color file"
    path = tmp_path / "html.txt"
    path.write_text(
        """color "Red" #FF0000
color "Teal" #008080
color "Lower" #abcdef
color "Broken" 123456
color "Missing"
""",
        encoding="utf-8",
    )
    return path
