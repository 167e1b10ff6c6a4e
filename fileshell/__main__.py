from fileshell.cli import main

raise SystemExit(main())
