from fitpulse.app import main

main()
