from stackpilot.cli import main

main()
