# conftest.py - shared pytest fixtures
import textwrap

import pytest


@pytest.fixture
def go_readme() -> str:
    return textwrap.dedent(
        """\
        # Title

        Some intro text.

        ```go {file=main.go}
        fmt.Println("a")
        ```

        More text between blocks.

        ```sh
        go run .
        ```

        The end.
        """
    )


@pytest.fixture
def go_source() -> str:
    return textwrap.dedent(
        """\
        package main

        // #region imports
        import "fmt"
        // #endregion

        func main() {
        \t// #region body
        \tfmt.Println("hi")
        \t// #endregion body
        }
        """
    )
