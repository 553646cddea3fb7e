from jsontodo.server import main

main()
