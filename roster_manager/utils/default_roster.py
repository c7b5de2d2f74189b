"""
Default roster written when no roster file exists.

Rows are stored exactly as they appear in the generated file, one
comma-separated line per roster entry in name, role, position, number,
offense/defense order. Missing values use the literal ``N/A``.
"""

DEFAULT_ROSTER_ROWS = (
    "Sam Howell,Player,Quarterback,14,Offense",
    "Jalen Hurts,Player,Quarterback,1,Offense",
    "Tanner McKee,Player,Quarterback,16,Offense",
    "Saquon Barkley,Player,Runningback,26,Offense",
    "Tank Bigsby,Player,Runningback,37,Offense",
    "AJ Dillon,Player,Runningback,29,Offense",
    "Will Shipley,Player,Runningback,28,Offense",
    "Carson Steele,Player,Runningback,42,Offense",
    "A.J. Brown,Player,Wide Receiver,11,Offense",
    "Darius Cooper,Player,Wide Receiver,80,Offense",
    "Britain Covey,Player,Wide Receiver,18,Offense",
    "Jahan Dotson,Player,Wide Receiver,2,Offense",
    "Danny Gray,Player,Wide Receiver,46,Offense",
    "DeVonta Smith,Player,Wide Receiver,6,Offense",
    "Quez Watkins,Player,Wide Receiver,16,Offense",
    "Grant Calcaterra,Player,Tight End,81,Offense",
    "Dallas Goedert,Player,Tight End,88,Offense",
    "Kylen Granson,Player,Tight End,83,Offense",
    "E.J. Jenkins,Player,Tight End,84,Offense",
    "Cameron Latu,Player,Tight End,36,Offense",
    "Cam Jurgens,Player,Center,51,Offense",
    "Drew Kendall,Player,Center,66,Offense",
    "Jake Majors,Player,Center,75,Offense",
    "Brett Toth,Player,Center,64,Offense",
    "Landon Dickerson,Player,Guard,69,Offense",
    "Tyler Steen,Player,Guard,56,Offense",
    "Fred Johnson,Player,Offensive Tackle,74,Offense",
    "Lane Johnson,Player,Offensive Tackle,65,Offense",
    "Jordan Mailata,Player,Offensive Tackle,68,Offense",
    "John Ojukwu,Player,Offensive Tackle,61,Offense",
    "Hollin Pierce,Player,Offensive Tackle,63,Offense",
    "Matt Pryor,Player,Offensive Tackle,79,Offense",
    "Cameron Williams,Player,Offensive Tackle,73,Offense",
    "Brandon Graham,Player,Defensive End,55,Defense",
    "Jose Ramirez,Player,Defensive End,N/A,Defense",
    "Jalen Carter,Player,Defensive Tackle,98,Defense",
    "Jordan Davis,Player,Defensive Tackle,90,Defense",
    "Gabe Hall,Player,Defensive Tackle,96,Defense",
    "Moro Ojomo,Player,Defensive Tackle,97,Defense",
    "Ty Robinson,Player,Defensive Tackle,95,Defense",
    "Jacob Sykes,Player,Defensive Tackle,93,Defense",
    "Byron Young,Player,Defensive Tackle,94,Defense",
    "Zack Baun,Player,Linebacker,53,Defense",
    "Chance Campbell,Player,Linebacker,59,Defense",
    "Jihaad Campbell,Player,Linebacker,30,Defense",
    "Nakobe Dean,Player,Linebacker,17,Defense",
    "Jalyx Hunt,Player,Linebacker,58,Defense",
    "Smael Mondon Jr,Player,Linebacker,42,Defense",
    "Jaelan Phillips,Player,Linebacker,50,Defense",
    "Nolan Smith Jr,Player,Linebacker,3,Defense",
    "Jeremiah Trotter Jr,Player,Linebacker,54,Defense",
    "Joshua Uche,Player,Linebacker,0,Defense",
    "Jakorian Bennett,Player,Cornerback,23,Defense",
    "Michael Carter II,Player,Cornerback,35,Defense",
    "Tariq Castro-Fields,Player,Cornerback,46,Defense",
    "Cooper DeJean,Player,Cornerback,33,Defense",
    "Adoree' Jackson,Player,Cornerback,8,Defense",
    "Brandon Johnson,Player,Cornerback,49,Defense",
    "Mac McWilliams,Player,Cornerback,22,Defense",
    "Quinyon Mitchell,Player,Cornerback,27,Defense",
    "Kelee Ringo,Player,Cornerback,7,Defense",
    "Ambry Thomas,Player,Defensive Back,38,Defense",
    "Reed Blankenship,Player,Safety,32,Defense",
    "Sydney Brown,Player,Safety,21,Defense",
    "Marcus Epps,Player,Safety,39,Defense",
    "Andre' Sam,Player,Safety,31,Defense",
    "Nick Sirianni,Coach,Head Coach,N/A,N/A",
    "Michael Clay,Coach,Specail Teams Coordinator,N/A,N/A",
    "Vic Fangio,Coach,Defensive Coordinator,N/A,Defense",
    "Kevin Patullo,Coach,Offensive Coordinator,N/A,Offense",
    "Roy Anderson,Coach,Cornerbacks Coach,N/A,Defense",
    "Joe Kasper,Coach,Safties Coach,N/A,Defense",
    "Bobby King,Coach,Inside Linebackers Coach,N/A,Defense",
    "Scot Loeffler,Coach,Quarterbacks Coach,N/A,Offense",
    "Jaon Michael,Coach,Tight Ends Coach,N/A,Offense",
    "Aaron Moorehead,Coach,Wide Receivers Coach,N/A,Offense",
    "Don Smolenski,Staff,President,N/A,N/A",
    "Jeffery Lurie,Staff,Chairman/CEO,N/A,N/A",
    "Christian Molnar,Staff,Director of Team Relationships,N/A,N/A",
    "Daniel Goldsmith,Staff,Business Manager,N/A,N/A",
    "Tara Sutphen,Staff,Operations and Event Director,N/A,N/A",
    "Howie Roseman,Staff,General Manager,N/A,N/A",
    "Dom DiSandro,Staff,CSO/Gameday Coaching Operations,N/A,N/A",
    "Conner Barwin,Staff,Head of Football Development and Strategy,N/A,N/A",
    "Kevin Dougherty,Staff,Video Director,N/A,N/A",
    "Dan Ryan,Staff,Director of Team Travel and Football Logistics,N/A,N/A",
    "Kathy Mair,Staff,Player Resource Coordinator,N/A,N/A",
    "Nick Church,Staff,Lead Software Innovator,N/A,N/A",
    "Matt Leo,Staff,Player Development Assistant,N/A,N/A",
    "Kevin Mahon,Staff,Football Creative Services Producer,N/A,N/A",
    "Patrick McDowll,Staff,Scout,N/A,N/A",
    "Grant Reiter,Staff,Football Transactions Coordinator,N/A,N/A",
    "Molly Rottinghaus,Staff,Football Operations Coordinator,N/A,N/A",
    "Leif Thorson,Staff,Software Developer,N/A,N/A",
    "Preston Tiffany,Staff,NFS Scout,N/A,N/A",
    "Terrance Braxton,Staff,Pro Scout,N/A,N/A",
    "Ameena Soliman,Staff,Director of Football Opertations/Pro Scout,N/A,N/A",
    "Julian Lurie,Staff,Business and Football Operations Strategy,N/A,N/A",
    "Fernando Noriega,Staff,Director of Player Performance and Sports Science,N/A,N/A",
    "Dustin Woods,Staff,Interpersonal Performance Director,N/A,N/A",
    "Steven Feldman,Staff,Coordinator of Rehabilitation,N/A,N/A",
    "Stephanie Coppola,Staff,Performance Nutririon Coordinator,N/A,N/A",
    "Dr. Arsh S. Dhanota,Staff,Head Team Physician,N/A,N/A",
    "Dr. Peter DeLuca,Staff,Head Orthopedic Surgeon,N/A,N/A",
    "Dr. Johannes Roedl,Staff,Musculoskeletal / Interventional Radiologist,N/A,N/A",
    "Alessandra Lane,Staff,Director of Live Event Production,N/A,N/A",
    "Summer Gilliam,Staff,Live Events Producer,N/A,N/A",
)
