from wentpy.cli import main

raise SystemExit(main())
