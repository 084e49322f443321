from report_toolkit.cli import main

raise SystemExit(main())
