from things_cli.mcp_server import main

main()
