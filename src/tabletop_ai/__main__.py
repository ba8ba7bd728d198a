from tabletop_ai.cli import main

main()
