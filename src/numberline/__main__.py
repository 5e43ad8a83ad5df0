"""
Run with: python -m numberline
"""
from numberline.main import main

if __name__ == "__main__":
    main()
