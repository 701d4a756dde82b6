from semtag.cli.cli import main

main()
