from ustr.cli import main

main()
