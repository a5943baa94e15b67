from lanshare.app_shell.cli import main

main()
