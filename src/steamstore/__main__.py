from steamstore.cli import main

main()
