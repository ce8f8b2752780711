from metaschemapy.cli.main import main

main()
