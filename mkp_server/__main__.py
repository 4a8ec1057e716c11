from .mcp_server_std import run

if __name__ == "__main__":
    run()
