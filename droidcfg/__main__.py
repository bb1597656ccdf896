from droidcfg.cli.app import main

main()
