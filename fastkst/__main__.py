from fastkst.cli import main

raise SystemExit(main())
