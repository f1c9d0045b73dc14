from hashbox.main import main

main()
