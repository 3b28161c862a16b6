from epv_loader.main import main

main()
