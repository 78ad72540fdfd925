"""termbanner showcase — run with: python3 -m termbanner"""

from .demo import main

main()
