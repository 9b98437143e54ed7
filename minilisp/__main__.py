from minilisp.main import main

main()
