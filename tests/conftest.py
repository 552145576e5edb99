"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def message_file(temp_dir):
    """Return a factory writing a COMMIT_EDITMSG file with the given content."""

    def _write(content: str) -> Path:
        path = temp_dir / "COMMIT_EDITMSG"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_editor_message():
    """Commit message as git hands it to the hook after editing."""
    return """Added helper.rb

# Please enter the commit message for your changes. Lines starting
# with '#' will be ignored, and an empty message aborts the commit.
#
# On branch main
# Changes to be committed:
#\tnew file:   lib/helper.rb
#
"""


@pytest.fixture
def sample_verbose_message():
    """Commit message from `git commit --verbose`, with the staged diff."""
    return """Added helper.rb

# Please enter the commit message for your changes. Lines starting
# with '#' will be ignored, and an empty message aborts the commit.
#
# ------------------------ >8 ------------------------
# Do not modify or remove the line above.
# Everything below it will be ignored.
diff --git a/lib/helper.rb b/lib/helper.rb
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/lib/helper.rb
@@ -0,0 +1,3 @@
+def helper
+  true
+end
"""
