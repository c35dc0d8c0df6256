from mimematch.cli import main

main()
