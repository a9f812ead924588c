from practice_toolkit.cli import main

raise SystemExit(main())
