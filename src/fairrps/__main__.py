from fairrps.cli import main

raise SystemExit(main())
