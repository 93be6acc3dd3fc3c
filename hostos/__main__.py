from hostos.cli.app import main

main()
