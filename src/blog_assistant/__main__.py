import sys

from blog_assistant.main import main

sys.exit(main())
