"""Allow ``python -m hashbench``."""

from hashbench.main import main

main()
