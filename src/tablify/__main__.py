from tablify.cli import main

raise SystemExit(main())
