from mssh.cli import main

main()
