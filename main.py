# main.py
"""
Application entrypoint. Runs the step tracker demonstration:
    python main.py
"""
from steptracker.demo import main

if __name__ == "__main__":
    main()
