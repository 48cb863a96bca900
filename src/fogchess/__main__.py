from fogchess.app import main

main()
