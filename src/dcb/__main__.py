from dcb.cli import main

raise SystemExit(main())
