from src.session.cli import main

raise SystemExit(main())
