from osfind.cli.main import main

main()
