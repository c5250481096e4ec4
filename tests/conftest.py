import sys
import os

import pytest

# Add src/ to sys.path so absolute imports (hostsedit.*) work uninstalled,
# and the project root so the app package is importable.
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_project_root, "src"))
sys.path.insert(0, _project_root)


SAMPLE_HOSTS = """\
# Static table lookup for hostnames.
127.0.0.1 localhost
::1 localhost6 ip6-localhost

10.0.0.5 db.internal cache.internal
#10.0.0.9 retired.internal
not an entry
"""


@pytest.fixture()
def write_hosts(tmp_path):
    """Return a helper writing *content* to a hosts file under tmp_path."""
    def _write(content: str, name: str = "hosts"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_hosts(write_hosts):
    """A small but realistic hosts file on disk."""
    return write_hosts(SAMPLE_HOSTS)
