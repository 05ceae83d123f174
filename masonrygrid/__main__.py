from masonrygrid.run_demo import main

main()
