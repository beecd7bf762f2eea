import os
import subprocess
import sys

# Get PORT from environment, default to 8501
port = os.environ.get("PORT", "8501")

# Ensure port is a valid integer
try:
    port_int = int(port)
except ValueError:
    print(f"Invalid PORT value: {port}, using 8501")
    port_int = 8501

print(f"Starting Streamlit on port {port_int}")

cmd = [
    sys.executable, "-m", "streamlit", "run", "app.py",
    f"--server.port={port_int}",
    "--server.address=0.0.0.0",
    "--server.headless=true",
]

subprocess.run(cmd)
