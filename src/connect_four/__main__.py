from connect_four.cli import main

main()
