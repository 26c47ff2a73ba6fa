from portfolio_api.app import main

main()
