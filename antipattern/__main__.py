from antipattern.cli.main import main

main()
