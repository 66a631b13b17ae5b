from mcp_launcher.main import main

main()
