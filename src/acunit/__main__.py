from acunit.cli import main

main()
